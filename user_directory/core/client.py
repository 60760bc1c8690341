"""
UserDirectoryClient - retrieves the full user collection.

One GET to a fixed endpoint; no query parameters, auth or pagination.
No retries: retrying is the caller's decision.
"""
import asyncio
import json
from typing import Optional

import aiohttp
from loguru import logger
from pydantic import ValidationError

from user_directory.core.errors import ParseError, TransportError
from user_directory.core.models import UserCollectionAdapter, UserRecord


DEFAULT_USERS_URL = "https://jsonplaceholder.typicode.com/users"


class UserDirectoryClient:
    """
    Async HTTP client for the directory endpoint.

    Example:
        client = UserDirectoryClient()
        users = await client.fetch_all()
    """

    def __init__(
        self,
        url: str = DEFAULT_USERS_URL,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize client.

        Args:
            url: Endpoint returning a JSON array of user objects
            timeout: Total request timeout in seconds (None = no timeout)
            session: Shared session; a short-lived one is opened per call if omitted
        """
        self.url = url
        self.timeout = timeout
        self._session = session

    async def fetch_all(self) -> list[UserRecord]:
        """
        Fetch every user record, in server order.

        Raises:
            TransportError: network failure, timeout or non-2xx status
            ParseError: payload is not a list of user-shaped objects
        """
        logger.debug(f"Fetching users from {self.url}")
        if self._session is not None:
            payload = await self._get_json(self._session)
        else:
            async with aiohttp.ClientSession() as session:
                payload = await self._get_json(session)

        users = self._parse(payload)
        logger.info(f"Fetched {len(users)} users")
        return users

    async def _get_json(self, session: aiohttp.ClientSession):
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with session.get(self.url, timeout=timeout) as response:
                if not 200 <= response.status < 300:
                    raise TransportError(
                        f"Failed to fetch users: HTTP {response.status}",
                        status=response.status,
                    )
                body = await response.read()
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timed out fetching users from {self.url}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Failed to fetch users: {e}") from e

        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Response is not valid JSON: {e}") from e

    @staticmethod
    def _parse(payload) -> list[UserRecord]:
        if not isinstance(payload, list):
            raise ParseError(f"Expected a JSON array, got {type(payload).__name__}")
        try:
            users = UserCollectionAdapter.validate_python(payload)
        except ValidationError as e:
            raise ParseError(f"Malformed user record: {e.error_count()} error(s)") from e

        # Cards and expand state are keyed by id
        seen = set()
        for user in users:
            if user.id in seen:
                raise ParseError(f"Duplicate user id: {user.id}")
            seen.add(user.id)
        return users
