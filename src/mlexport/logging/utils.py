"""
Utility functions for mlexport logging.

Sanitization of tokens in logged data and URLs, plus log file housekeeping.
"""

import re
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Tuple

from mlexport.constants import LOG_FILE_NAME

# Patterns masked in free text and URLs
_STRING_PATTERNS = [
    (r'Bearer\s+[A-Za-z0-9\-._~+/]+=*', 'Bearer ***'),
    (r'([?&](?:access_token|token|secret|password|api_key)=)[^&\s]+', r'\1***'),
    (r'APP_USR-[A-Za-z0-9\-]+', 'APP_USR-***'),
]


def sanitize_data(data: Any, sensitive_keys: Tuple[str, ...]) -> Any:
    """
    Recursively sanitize sensitive data from dictionaries, lists, and strings.

    Args:
        data: Data to sanitize
        sensitive_keys: Key fragments whose values are masked

    Returns:
        Any: Sanitized copy of the data
    """
    if isinstance(data, dict):
        return sanitize_dict(data, sensitive_keys)
    elif isinstance(data, list):
        return [sanitize_data(item, sensitive_keys) for item in data]
    elif isinstance(data, str):
        return sanitize_string(data)
    return data


def sanitize_dict(data: Dict[str, Any], sensitive_keys: Tuple[str, ...]) -> Dict[str, Any]:
    """Mask values stored under sensitive keys"""
    sanitized = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(sensitive_key.lower() in key_lower for sensitive_key in sensitive_keys):
            if isinstance(value, str) and len(value) > 8:
                sanitized[key] = f"{value[:4]}...{value[-4:]}"
            else:
                sanitized[key] = "***"
        else:
            sanitized[key] = sanitize_data(value, sensitive_keys)
    return sanitized


def sanitize_string(data: str) -> str:
    """Mask bearer tokens and token query parameters in text"""
    sanitized = data
    for pattern, replacement in _STRING_PATTERNS:
        sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)
    return sanitized


def cleanup_old_logs(log_directory: Path, retention_days: int = 30) -> int:
    """
    Delete rotated log files older than the retention period.

    Args:
        log_directory: Directory containing log files
        retention_days: Number of days to retain logs

    Returns:
        int: Number of files removed
    """
    if not log_directory.exists():
        return 0

    cutoff = (datetime.now() - timedelta(days=retention_days)).timestamp()
    removed: List[Path] = []

    for log_file in log_directory.glob(f"{LOG_FILE_NAME}.log.*"):
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                removed.append(log_file)
        except OSError:
            continue

    return len(removed)


def get_log_directory() -> Path:
    """Get the log directory path (re-exported from config)"""
    from .config import get_log_directory as _get_log_directory
    return _get_log_directory()
