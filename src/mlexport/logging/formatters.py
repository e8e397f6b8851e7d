"""
Custom formatters for mlexport logging.
"""

import logging
from datetime import datetime
from typing import Optional

from mlexport.constants import SENSITIVE_KEYS
from .utils import sanitize_data, sanitize_string


class MLExportFormatter(logging.Formatter):
    """
    Default formatter for mlexport log entries.

    Masks sensitive data in dict/list messages and arguments, and token
    parameters in plain text messages.
    """

    def __init__(
        self,
        include_timestamps: bool = True,
        sanitize_sensitive: bool = True,
        sensitive_keys: Optional[tuple] = None,
    ):
        self.include_timestamps = include_timestamps
        self.sanitize_sensitive = sanitize_sensitive
        self.sensitive_keys = sensitive_keys or SENSITIVE_KEYS
        fmt_parts = []
        if include_timestamps:
            fmt_parts.append("%(asctime)s")
        fmt_parts.extend(["%(levelname)s", "[%(name)s]", "%(message)s"])
        super().__init__(fmt=" ".join(fmt_parts), datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        if self.sanitize_sensitive:
            if isinstance(record.msg, (dict, list)):
                record.msg = sanitize_data(record.msg, self.sensitive_keys)
            elif isinstance(record.msg, str):
                record.msg = sanitize_string(record.msg)
            if isinstance(record.args, dict):
                record.args = sanitize_data(record.args, self.sensitive_keys)
            elif isinstance(record.args, (tuple, list)):
                record.args = tuple(
                    sanitize_data(arg, self.sensitive_keys)
                    if isinstance(arg, (dict, list))
                    else arg
                    for arg in record.args
                )

        return super().format(record)


class APICallFormatter(logging.Formatter):
    """
    Formatter for API call records.

    Example:
        2026-02-02 17:27:34 DEBUG [mlexport.api] GET /sites/MLA/search?offset=50 -> 200 (120.5ms)
    """

    def __init__(self, sanitize_sensitive: bool = True):
        self.sanitize_sensitive = sanitize_sensitive
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        method = getattr(record, "api_method", "UNKNOWN")
        url = getattr(record, "api_url", "")
        status = getattr(record, "api_status", None) or "---"
        duration = round(getattr(record, "api_duration", 0) * 1000, 2)

        if self.sanitize_sensitive:
            url = sanitize_string(url)

        lines = [
            f"{timestamp} {record.levelname} [{record.name}] "
            f"{method} {url} -> {status} ({duration}ms)"
        ]

        api_error = getattr(record, "api_error", None)
        if api_error:
            lines.append(f"    Error: {api_error}")

        return "\n".join(lines)
