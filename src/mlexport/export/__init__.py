"""
Streaming export pipeline.

Pager, position remapping, formatters, sink writer and the driver loop
that ties them together.
"""

from .errors import (
    ExportError,
    FetchFailedError,
    ResultsNotFoundError,
    WriteFailedError,
    LookupFailedError,
    PagerExhaustedError,
)
from .position import Position, item_positions
from .pager import Page, PageSource, FunctionPageSource, Pager
from .formatters import (
    JsonFormatter,
    SearchCsvFormatter,
    SearchCsvWithNicknameFormatter,
    OrderCsvFormatter,
)
from .sink import SinkWriter
from .sources import SearchPageSource, OrdersPageSource, filter_args
from .driver import (
    ExportOptions,
    ExportResult,
    OutputFormat,
    PagingScheme,
    export_orders,
    export_search,
    run_export,
    select_formatter,
)

__all__ = [
    "ExportError",
    "FetchFailedError",
    "ResultsNotFoundError",
    "WriteFailedError",
    "LookupFailedError",
    "PagerExhaustedError",
    "Position",
    "item_positions",
    "Page",
    "PageSource",
    "FunctionPageSource",
    "Pager",
    "JsonFormatter",
    "SearchCsvFormatter",
    "SearchCsvWithNicknameFormatter",
    "OrderCsvFormatter",
    "SinkWriter",
    "SearchPageSource",
    "OrdersPageSource",
    "filter_args",
    "ExportOptions",
    "ExportResult",
    "OutputFormat",
    "PagingScheme",
    "export_orders",
    "export_search",
    "run_export",
    "select_formatter",
]
