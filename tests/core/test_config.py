import json

import pytest

from user_directory.core.config import ConfigManager
from user_directory.core.events import Signal
from user_directory.core.logging import setup_logging
from unittest.mock import MagicMock


def test_defaults_written_when_missing(tmp_path):
    path = tmp_path / "config.json"
    config = ConfigManager(str(path))

    assert config.data.api.users_url == "https://jsonplaceholder.typicode.com/users"
    assert config.data.api.timeout_seconds is None
    assert config.data.storage.preferences_file == "preferences.json"
    assert path.is_file()
    assert json.loads(path.read_text())["general"]["window_title"] == "User Directory"


def test_load_existing_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"api": {"users_url": "http://localhost/users", "timeout_seconds": 5}}))

    config = ConfigManager(str(path))

    assert config.get("api", "users_url") == "http://localhost/users"
    assert config.get("api", "timeout_seconds") == 5
    assert config.get("general", "debug_mode") is False


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    config = ConfigManager(str(path))

    assert config.data.general.log_dir == "logs"
    assert json.loads(path.read_text())["general"]["log_dir"] == "logs"


def test_update_persists_and_emits(tmp_path):
    path = tmp_path / "config.json"
    config = ConfigManager(str(path))
    received = []
    config.on_changed.connect(lambda section, key, value: received.append((section, key, value)))

    config.update("api", "timeout_seconds", 2.5)

    assert config.data.api.timeout_seconds == 2.5
    assert received == [("api", "timeout_seconds", 2.5)]
    assert json.loads(path.read_text())["api"]["timeout_seconds"] == 2.5


def test_update_rejects_unknown_names(tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))

    with pytest.raises(ValueError):
        config.update("nope", "x", 1)
    with pytest.raises(ValueError):
        config.update("api", "nope", 1)


def test_signal_event():
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1


def test_signal_subscriber_error_does_not_stop_others():
    sig = Signal("boom")
    after = MagicMock()
    sig.connect(MagicMock(side_effect=RuntimeError("fail")))
    sig.connect(after)

    sig.emit(1)

    after.assert_called_once_with(1)


def test_setup_logging_creates_file_sink(tmp_path):
    log_dir = tmp_path / "logs"

    path = setup_logging(debug_mode=True, log_dir=str(log_dir))

    assert log_dir.is_dir()
    assert path.startswith(str(log_dir))


def test_setup_logging_console_only(tmp_path):
    assert setup_logging(log_dir=None) is None
    assert list(tmp_path.iterdir()) == []


def test_signal_connect_is_idempotent():
    sig = Signal("dupes")
    handler = MagicMock()

    sig.connect(handler)
    sig.connect(handler)
    sig.emit()

    handler.assert_called_once_with()
