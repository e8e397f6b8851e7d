"""
Logging configuration for mlexport.

Where log files live and what gets logged at which level.
"""

import os
import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from mlexport.constants import LOG_DIR_ENV, LOG_FILE_NAME, LOG_RETENTION_DAYS, SENSITIVE_KEYS


class LogLevel(Enum):
    """Log levels for mlexport logging"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class LogConfig:
    """Configuration class for mlexport logging"""

    log_filename: str = f"{LOG_FILE_NAME}.log"
    log_retention_days: int = LOG_RETENTION_DAYS

    # File level and console level
    default_level: LogLevel = LogLevel.INFO
    console_level: LogLevel = LogLevel.WARNING
    include_timestamps: bool = True

    # One line per marketplace request, in the same file
    log_api_calls: bool = True

    # Masks access tokens in messages, URLs and structured details
    sanitize_sensitive_data: bool = True
    sensitive_keys: tuple = SENSITIVE_KEYS


def _platform_log_dir() -> Path:
    """Per-platform default: APPDATA, ~/Library/Logs or the XDG data home"""
    system = platform.system()
    if system == "Windows":
        appdata = Path(os.environ.get("APPDATA", ""))
        return (appdata if appdata.exists() else Path.home()) / LOG_FILE_NAME / "logs"
    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / LOG_FILE_NAME
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / LOG_FILE_NAME / "logs"


def get_log_directory() -> Path:
    """
    Get the log directory, creating it if missing.

    ``MLEXPORT_LOG_DIR`` overrides the platform default. When the directory
    cannot be created, logs go to ``./logs``.
    """
    override = os.environ.get(LOG_DIR_ENV)
    log_dir = Path(override) if override else _platform_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        log_dir = Path.cwd() / "logs"
        log_dir.mkdir(exist_ok=True)
    return log_dir


def get_log_file_path(config: Optional[LogConfig] = None) -> Path:
    """Full path of the active log file"""
    return get_log_directory() / (config or LogConfig()).log_filename
