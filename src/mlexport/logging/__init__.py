"""
mlexport logging module.

Structured logging for the mlexport CLI: a daily rotating log file in a
platform-specific directory, API call tracking for page fetches, export
events, and sanitization of access tokens before anything is written.
"""

from .logger import (
    get_logger,
    setup_logging,
    log_api_call,
    log_export_event,
)
from .config import LogConfig, LogLevel
from .utils import sanitize_data, get_log_directory

__all__ = [
    "get_logger",
    "setup_logging",
    "log_api_call",
    "log_export_event",
    "LogLevel",
    "LogConfig",
    "sanitize_data",
    "get_log_directory",
]
