import os
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = False, log_dir: Optional[str] = "logs") -> Optional[str]:
    """
    Configures Loguru for the directory app.

    Console level follows debug_mode; the rotating file sink always
    records DEBUG. Pass log_dir=None to log to the console only.

    Returns:
        Path pattern of the file sink, or None when file logging is off
    """
    logger.remove()

    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    log_path = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, "user_directory_{time}.log")
        logger.add(log_path, rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info(f"Logging initialized (console level {level})")
    return log_path
