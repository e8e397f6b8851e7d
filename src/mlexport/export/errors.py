"""
Exception types raised by the export pipeline.
"""

from typing import Optional


class ExportError(Exception):
    """Base exception for all export errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class FetchFailedError(ExportError):
    """Raised when the page source could not deliver a page."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, original_error)
        self.status_code = status_code


class ResultsNotFoundError(ExportError):
    """Raised when a fetch returns no items where at least one was expected."""

    def __init__(self, offset: int, total: int) -> None:
        super().__init__(f"No results found at offset {offset} (total {total})")
        self.offset = offset
        self.total = total


class WriteFailedError(ExportError):
    """Raised when the sink rejects a write."""


class LookupFailedError(ExportError):
    """Raised when a user lookup fails."""

    def __init__(self, user_id, original_error: Optional[Exception] = None) -> None:
        super().__init__(f"Lookup failed for user {user_id}", original_error)
        self.user_id = user_id


class PagerExhaustedError(ExportError):
    """Raised when the pager is asked for a page after the terminal one."""

    def __init__(self) -> None:
        super().__init__("Pager already returned its last page")
