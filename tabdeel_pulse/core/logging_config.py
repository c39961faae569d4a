"""
Logging Configuration Module.

Centralised logging for Tabdeel Pulse. ``setup_logging`` is called once by the
server entry point; every other module only calls ``get_logger(__name__)``.

Features:
- One console handler on the root logger, replaced (not duplicated) on re-setup
- Optional size-rotated log file
- Three line formats: simple, detailed and a JSON-like line
- Per-package levels so SQL and HTTP client chatter stays quiet
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

LOG_LEVEL = os.getenv("TABDEEL_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("TABDEEL_LOG_FORMAT", "detailed")
LOG_FILE_DIR = os.getenv("TABDEEL_LOG_FILE_DIR", "logs")
ENABLE_FILE_LOGGING = os.getenv("TABDEEL_ENABLE_FILE_LOGGING", "false").lower() in ("true", "1", "yes")

LOG_FILE_NAME = "tabdeel_pulse.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FORMATS: Dict[str, str] = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

MODULE_LOG_LEVELS: Dict[str, str] = {
    "tabdeel_pulse": "INFO",
    "tabdeel_pulse.core.database": "INFO",
    "tabdeel_pulse.server.api": "DEBUG",
    "tabdeel_pulse.server.services": "DEBUG",
    # third-party
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "alembic": "INFO",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def resolve_format(log_format: Optional[str]) -> str:
    """Format string for a format name; unknown names fall back to ``detailed``."""
    return LOG_FORMATS.get(log_format or LOG_FORMAT, DETAILED_FORMAT)


def _file_handler(directory: Path, formatter: logging.Formatter) -> logging.Handler:
    directory.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        directory / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    # the file keeps everything; the console is filtered by ``log_level``
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = ENABLE_FILE_LOGGING,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to TABDEEL_LOG_LEVEL
        log_format: simple, detailed or json; defaults to TABDEEL_LOG_FORMAT
        enable_file: Also write a rotating log file
        log_file_dir: Directory for the log file; defaults to TABDEEL_LOG_FILE_DIR
    """
    level = (log_level or LOG_LEVEL).upper()
    formatter = logging.Formatter(resolve_format(log_format), datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if enable_file:
        root_logger.addHandler(_file_handler(Path(log_file_dir or LOG_FILE_DIR), formatter))

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={log_format or LOG_FORMAT}, file_logging={enable_file}")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (pass ``__name__``)."""
    return logging.getLogger(name)
