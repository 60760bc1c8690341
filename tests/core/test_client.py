import asyncio
from contextlib import asynccontextmanager

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from user_directory.core.client import UserDirectoryClient
from user_directory.core.errors import DirectoryError, ParseError, TransportError


@asynccontextmanager
async def serve(handler):
    """Run a local endpoint and yield its /users URL."""
    app = web.Application()
    app.router.add_get("/users", handler)
    server = TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/users"))
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_fetch_all_preserves_server_order(sample_payload):
    async def handler(request):
        return web.json_response(sample_payload)

    async with serve(handler) as url:
        users = await UserDirectoryClient(url).fetch_all()

    assert [u.id for u in users] == [1, 2, 3, 4, 5]
    assert users[1].name == "Ervin Howell"


@pytest.mark.asyncio
async def test_fetch_all_with_shared_session(sample_payload):
    async def handler(request):
        return web.json_response(sample_payload[:2])

    async with serve(handler) as url:
        async with aiohttp.ClientSession() as session:
            client = UserDirectoryClient(url, session=session)
            first = await client.fetch_all()
            second = await client.fetch_all()
            assert not session.closed

    assert first == second
    assert len(first) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_non_success_status_is_transport_error(status):
    async def handler(request):
        return web.Response(status=status, text="nope")

    async with serve(handler) as url:
        with pytest.raises(TransportError) as exc_info:
            await UserDirectoryClient(url).fetch_all()

    assert exc_info.value.status == status


@pytest.mark.asyncio
async def test_unreachable_host_is_transport_error():
    client = UserDirectoryClient("http://127.0.0.1:1/users")

    with pytest.raises(TransportError) as exc_info:
        await client.fetch_all()

    assert exc_info.value.status is None
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)


@pytest.mark.asyncio
async def test_timeout_is_transport_error():
    async def handler(request):
        await asyncio.sleep(1)
        return web.json_response([])

    async with serve(handler) as url:
        with pytest.raises(TransportError):
            await UserDirectoryClient(url, timeout=0.05).fetch_all()


@pytest.mark.asyncio
async def test_invalid_json_is_parse_error():
    async def handler(request):
        return web.Response(text="<html>not json</html>", content_type="text/html")

    async with serve(handler) as url:
        with pytest.raises(ParseError):
            await UserDirectoryClient(url).fetch_all()


@pytest.mark.asyncio
async def test_undecodable_body_is_parse_error():
    async def handler(request):
        return web.Response(body=b'[{"name": "\xff\xfe"}]', content_type="application/json")

    async with serve(handler) as url:
        with pytest.raises(ParseError):
            await UserDirectoryClient(url).fetch_all()


@pytest.mark.asyncio
async def test_non_array_payload_is_parse_error(sample_payload):
    async def handler(request):
        return web.json_response({"users": sample_payload})

    async with serve(handler) as url:
        with pytest.raises(ParseError):
            await UserDirectoryClient(url).fetch_all()


@pytest.mark.asyncio
async def test_malformed_record_is_parse_error(sample_payload):
    del sample_payload[2]["company"]

    async def handler(request):
        return web.json_response(sample_payload)

    async with serve(handler) as url:
        with pytest.raises(ParseError):
            await UserDirectoryClient(url).fetch_all()


@pytest.mark.asyncio
async def test_duplicate_ids_are_parse_error(sample_payload):
    sample_payload[1]["id"] = 1

    async def handler(request):
        return web.json_response(sample_payload)

    async with serve(handler) as url:
        with pytest.raises(ParseError, match="Duplicate user id: 1"):
            await UserDirectoryClient(url).fetch_all()


@pytest.mark.asyncio
async def test_empty_array_is_valid():
    async def handler(request):
        return web.json_response([])

    async with serve(handler) as url:
        assert await UserDirectoryClient(url).fetch_all() == []


def test_error_hierarchy():
    assert issubclass(TransportError, DirectoryError)
    assert issubclass(ParseError, DirectoryError)
