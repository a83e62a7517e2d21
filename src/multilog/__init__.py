"""Multi-destination logger: one ``log(level, message)`` call, written to
the console, a plain log file and/or an HTML file.

    from multilog import create_logger

    log = create_logger({"output": {"console": "", "file": "app.log"}})
    log.log("info", "started")
"""
from .colorizer import Colorizer, DEFAULT_LEVELS
from .config import LoggerConfig
from .core.errors import (
    MultilogError,
    UnknownLevelError,
    InvalidDestinationError,
    WriteFault,
    ConfigLoadError,
)
from .factory import create_logger, LoggerFactory
from .logger import Logger

__all__ = [
    "Colorizer", "DEFAULT_LEVELS", "LoggerConfig", "Logger",
    "create_logger", "LoggerFactory",
    "MultilogError", "UnknownLevelError", "InvalidDestinationError",
    "WriteFault", "ConfigLoadError",
]
