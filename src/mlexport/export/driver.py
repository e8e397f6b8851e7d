"""
Export driver.

Runs the streaming export loop: pages come out of the pager, get their
per-item positions, are formatted one item at a time and written to the
sink in order. Nothing beyond the current page is held in memory.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional

from mlexport.constants import DEFAULT_FORMAT, DEFAULT_LIMIT, DEFAULT_OFFSET
from mlexport.logging import get_logger, log_export_event
from .errors import ExportError
from .formatters import (
    Formatter,
    JsonFormatter,
    OrderCsvFormatter,
    SearchCsvFormatter,
    SearchCsvWithNicknameFormatter,
    UserLookup,
)
from .pager import Document, PageSource, Pager
from .position import Position, item_positions
from .sink import Destination, SinkWriter
from .sources import OrdersPageSource, SearchPageSource

# Called after each page: (page position, items in page, reported total)
PageCallback = Callable[[Position, int, int], None]


class PagingScheme(Enum):
    """Query argument set and document shape of an export"""

    SEARCH = "search"
    ORDERS = "orders"


class OutputFormat(Enum):
    """Encoding of the exported stream"""

    JSON = "json"
    CSV = "csv"


@dataclass(frozen=True)
class ExportOptions:
    """Options resolved once per export"""

    output_format: OutputFormat = OutputFormat(DEFAULT_FORMAT)
    include_extra_column: bool = False
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT

    def __post_init__(self):
        if not isinstance(self.output_format, OutputFormat):
            try:
                object.__setattr__(self, "output_format", OutputFormat(self.output_format))
            except ValueError:
                raise ValueError(
                    f"Unsupported format '{self.output_format}'. Use json or csv"
                ) from None
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")


@dataclass
class ExportResult:
    """Summary of a finished export"""

    pages: int = 0
    items: int = 0
    total: int = 0


def select_formatter(
    scheme: PagingScheme,
    options: ExportOptions,
    lookup: Optional[UserLookup] = None,
) -> Formatter:
    """
    Pick the formatter for a paging scheme and output format.

    Args:
        scheme: Paging scheme of the export
        options: Export options
        lookup: User lookup, needed for the search nickname column

    Returns:
        Formatter instance
    """
    if options.output_format is OutputFormat.JSON:
        return JsonFormatter()

    if scheme is PagingScheme.ORDERS:
        return OrderCsvFormatter()

    if options.include_extra_column:
        if lookup is None:
            raise ValueError("A user lookup is required to include seller nicknames")
        return SearchCsvWithNicknameFormatter(lookup)
    return SearchCsvFormatter()


def write_page(
    sink: SinkWriter,
    page_position: Position,
    formatter: Formatter,
    items: List[Document],
) -> None:
    """Format and write every item of a page, in order"""
    for position, doc in zip(item_positions(page_position, len(items)), items):
        sink.write(formatter.format(position, doc))


def stream_pages(
    sink: SinkWriter,
    pager: Pager,
    formatter: Formatter,
    on_page: Optional[PageCallback] = None,
) -> ExportResult:
    """
    Pull pages from the pager and write them until the terminal page.

    Args:
        sink: Open sink writer
        pager: Pager positioned at the first window
        formatter: Formatter for the output encoding
        on_page: Optional progress callback

    Returns:
        ExportResult with page and item counts
    """
    result = ExportResult()
    for page_position, items in pager.pages():
        write_page(sink, page_position, formatter, items)
        result.pages += 1
        result.items += len(items)
        result.total = pager.total_seen
        if on_page:
            on_page(page_position, len(items), pager.total_seen)
    return result


def run_export(
    destination: Destination,
    source: PageSource,
    formatter: Formatter,
    options: ExportOptions,
    on_page: Optional[PageCallback] = None,
    name: str = "export",
) -> ExportResult:
    """
    Stream every page of a source into a destination.

    The sink is released exactly once whether the export succeeds or not.

    Raises:
        ExportError: The first fetch, empty-page or write error met
    """
    logger = get_logger("mlexport.export.driver")
    start_time = time.time()
    logger.info(
        f"Starting {name} export: format={options.output_format.value}, "
        f"offset={options.offset}, limit={options.limit}"
    )

    pager = Pager(source, offset=options.offset, limit=options.limit)
    try:
        with SinkWriter(destination) as sink:
            result = stream_pages(sink, pager, formatter, on_page)
    except ExportError as e:
        log_export_event(name, success=False, details={"error": e.message, "offset": pager.offset})
        raise

    duration = time.time() - start_time
    logger.info(
        f"Export {name} completed: {result.items} items in {result.pages} pages "
        f"({duration:.2f}s)"
    )
    log_export_event(
        name,
        success=True,
        details={"pages": result.pages, "items": result.items, "total": result.total},
    )
    return result


def export_search(
    destination: Destination,
    site_id: str,
    args: Optional[Mapping[str, Any]],
    options: ExportOptions,
    client,
    on_page: Optional[PageCallback] = None,
) -> ExportResult:
    """Export item search results for a site"""
    source = SearchPageSource(client, site_id, args)
    formatter = select_formatter(PagingScheme.SEARCH, options, lookup=client)
    return run_export(destination, source, formatter, options, on_page, name="search")


def export_orders(
    destination: Destination,
    args: Optional[Mapping[str, Any]],
    options: ExportOptions,
    client,
    on_page: Optional[PageCallback] = None,
) -> ExportResult:
    """Export the orders of the authenticated seller"""
    source = OrdersPageSource(client, args)
    formatter = select_formatter(PagingScheme.ORDERS, options)
    return run_export(destination, source, formatter, options, on_page, name="orders")
