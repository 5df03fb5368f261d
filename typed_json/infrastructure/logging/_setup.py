# typed_json/infrastructure/logging/_setup.py

"""Logging configuration and setup"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger

# Local imports
from typed_json.infrastructure.config import LoggingConfig

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
) -> str | None:
    """Configure logging for an application using typed_json

    Args:
        log_file: Path to log file, None to log to the console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    # Unknown names fall back to INFO
    level = getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = INFO

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    return None


def set_up_logging_from_config(config: LoggingConfig, silent: bool = False) -> str | None:
    """Configure logging from the logging section of a ReaderConfig"""
    return set_up_logging(
        log_file=config.log_file,
        log_level="DEBUG" if config.debug else "INFO",
        silent=silent,
    )
