"""
Main logging module for mlexport.

Provides logger setup with daily rotation and the helpers used to record
API calls and export outcomes.
"""

import json
import logging
import logging.handlers
import sys
from typing import Any, Dict, Optional

from .config import LogConfig, LogLevel, get_log_file_path
from .formatters import APICallFormatter, MLExportFormatter
from .utils import cleanup_old_logs, sanitize_data

# Global logger registry
_loggers: Dict[str, logging.Logger] = {}
_logging_configured = False
_log_config: Optional[LogConfig] = None


def _read_user_level() -> Optional[LogLevel]:
    """Read the log level stored in the user settings, if any"""
    from mlexport.utils.config_store import ConfigStore

    settings_file = ConfigStore().settings_file
    if not settings_file.exists():
        return None
    with open(settings_file, "r", encoding="utf-8") as f:
        user_level = json.load(f).get("log_level")
    if user_level in [lev.value for lev in LogLevel]:
        return LogLevel(user_level)
    return None


def _rotating_handler(config: LogConfig) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=get_log_file_path(config),
        when="midnight",
        interval=1,
        backupCount=config.log_retention_days,
        encoding="utf-8",
        utc=False,
    )
    # Rotated files get a YYYY-MM-DD suffix
    handler.suffix = "%Y-%m-%d"
    return handler


def setup_logging(config: Optional[LogConfig] = None, force_reconfigure: bool = False) -> None:
    """
    Set up the mlexport logging system.

    Args:
        config: LogConfig instance, uses default if None
        force_reconfigure: Force reconfiguration even if already set up
    """
    global _logging_configured, _log_config

    if _logging_configured and not force_reconfigure:
        return

    if config is None:
        config = LogConfig()
        try:
            user_level = _read_user_level()
            if user_level:
                config.default_level = user_level
        except (OSError, ValueError):
            # Unreadable settings fall back to the default level
            pass

    _log_config = config
    log_file_path = get_log_file_path(config)

    root_logger = logging.getLogger("mlexport")
    root_logger.setLevel(getattr(logging, config.default_level.value))
    root_logger.handlers.clear()

    file_handler = _rotating_handler(config)
    file_handler.setLevel(getattr(logging, config.default_level.value))
    file_handler.setFormatter(
        MLExportFormatter(
            include_timestamps=config.include_timestamps,
            sanitize_sensitive=config.sanitize_sensitive_data,
            sensitive_keys=config.sensitive_keys,
        )
    )
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.console_level.value))
    console_handler.setFormatter(
        MLExportFormatter(
            include_timestamps=False,
            sanitize_sensitive=config.sanitize_sensitive_data,
            sensitive_keys=config.sensitive_keys,
        )
    )
    root_logger.addHandler(console_handler)

    # API calls go to the same file with their own format
    api_logger = logging.getLogger("mlexport.api")
    api_logger.setLevel(logging.DEBUG)
    api_logger.handlers.clear()
    if config.log_api_calls:
        api_handler = _rotating_handler(config)
        api_handler.setLevel(logging.DEBUG)
        api_handler.setFormatter(APICallFormatter(sanitize_sensitive=config.sanitize_sensitive_data))
        api_logger.addHandler(api_handler)
    api_logger.propagate = False

    try:
        cleanup_old_logs(log_file_path.parent, config.log_retention_days)
    except OSError:
        pass

    _logging_configured = True

    get_logger("mlexport.setup").info(
        f"Logging initialized - File: {log_file_path}, Level: {config.default_level.value}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (e.g., 'mlexport.export.driver')

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_configured:
        setup_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def log_api_call(
    method: str,
    url: str,
    status_code: Optional[int] = None,
    duration: Optional[float] = None,
    response_size: Optional[int] = None,
    error: Optional[str] = None,
    logger_name: str = "mlexport.api",
) -> None:
    """
    Log an API call with structured information.

    Args:
        method: HTTP method
        url: Request URL
        status_code: Response status code
        duration: Request duration in seconds
        response_size: Response payload size in bytes
        error: Error message if request failed
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)

    extra = {
        "api_method": method,
        "api_url": url,
        "api_status": status_code,
        "api_duration": duration or 0,
    }
    if response_size is not None:
        extra["api_response_size"] = response_size
    if error:
        extra["api_error"] = error

    if error or (status_code and status_code >= 500):
        logger.error("API call failed", extra=extra)
    elif status_code and 400 <= status_code < 500:
        logger.warning("API call client error", extra=extra)
    else:
        logger.debug("API call completed", extra=extra)


def log_export_event(
    name: str,
    success: bool,
    details: Optional[Dict[str, Any]] = None,
    logger_name: str = "mlexport.events",
) -> None:
    """
    Log the outcome of an export.

    Args:
        name: Export name (search, orders)
        success: Whether the export finished
        details: Counters or error details (sanitized before logging)
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    extra = {"export_name": name, "export_success": success}

    if details:
        from mlexport.constants import SENSITIVE_KEYS
        extra["export_details"] = sanitize_data(details, SENSITIVE_KEYS)

    if success:
        logger.info(f"Export finished: {name} {extra.get('export_details', {})}", extra=extra)
    else:
        logger.error(f"Export aborted: {name} {extra.get('export_details', {})}", extra=extra)
