"""
Application entry point.

Builds config, logging, client, preferences and view model, then runs the
window on a qasync event loop so the fetch can be awaited from Qt.
"""
import argparse
import asyncio
import sys
from pathlib import Path

import qasync
from PySide6.QtWidgets import QApplication
from loguru import logger

from user_directory.core.client import UserDirectoryClient
from user_directory.core.config import ConfigManager
from user_directory.core.logging import setup_logging
from user_directory.core.preferences import JsonFileStore, ThemePreferenceStore
from user_directory.ui.theme import ThemeController
from user_directory.ui.viewmodels.directory_viewmodel import DirectoryViewModel


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="user-directory", description="Browse the user directory.")
    parser.add_argument("--config", default="config.json", help="Path to JSON/TOML config file")
    parser.add_argument("--debug", action="store_true", help="Force debug logging")
    return parser.parse_args(argv)


def build_viewmodel(config: ConfigManager) -> DirectoryViewModel:
    """Wire services from config."""
    data = config.data
    client = UserDirectoryClient(url=data.api.users_url, timeout=data.api.timeout_seconds)

    prefs_path = Path(data.storage.preferences_file)
    if not prefs_path.is_absolute():
        prefs_path = Path(config.filepath).resolve().parent / prefs_path
    theme = ThemeController(ThemePreferenceStore(JsonFileStore(prefs_path)))

    return DirectoryViewModel(client, theme)


async def async_main(config: ConfigManager):
    from user_directory.ui.main_window import MainWindow

    viewmodel = build_viewmodel(config)
    viewmodel.initialize()

    window = MainWindow(viewmodel, title=config.data.general.window_title)
    window.show()
    logger.info("Application Started")

    # First fetch runs on the loop; the window stays responsive meanwhile
    load_task = asyncio.ensure_future(viewmodel.load())

    # Keep references to prevent GC
    return window, load_task


def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager(args.config)
    setup_logging(debug_mode=args.debug or config.data.general.debug_mode,
                  log_dir=config.data.general.log_dir)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle("Fusion")
    # qasync merges the asyncio and Qt event loops
    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    with loop:
        refs = loop.run_until_complete(async_main(config))
        loop.run_forever()
    return refs


if __name__ == "__main__":  # pragma: no cover - interactive entry point
    main()
