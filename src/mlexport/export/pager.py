"""
Offset/limit pager over a page source.

The pager owns the cursor for a single export: it asks the page source for
consecutive windows and tags every page with its position in the stream.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Protocol, Tuple

from mlexport.logging import get_logger
from .errors import ExportError, FetchFailedError, PagerExhaustedError, ResultsNotFoundError
from .position import Position

Document = Dict[str, Any]


@dataclass
class Page:
    """One fetched window of results"""

    total: int
    offset: int
    limit: int
    items: List[Document] = field(default_factory=list)


class PageSource(Protocol):
    """Anything able to fetch a window of results"""

    def fetch(self, offset: int, limit: int) -> Page:
        ...


class FunctionPageSource:
    """Adapts a plain ``fetch(offset, limit)`` callable to PageSource"""

    def __init__(self, fetch_page: Callable[[int, int], Page]):
        self._fetch_page = fetch_page

    def fetch(self, offset: int, limit: int) -> Page:
        return self._fetch_page(offset, limit)


class Pager:
    """Turns repeated fetches into a sequence of positioned pages"""

    def __init__(self, source: PageSource, offset: int, limit: int):
        self.source = source
        self.limit = limit
        self.offset = offset
        self.total_seen = 0
        self.fetched_any = False
        self.exhausted = False
        self.logger = get_logger("mlexport.export.pager")

    def next_page(self) -> Tuple[Position, List[Document]]:
        """
        Fetch the next page and classify it.

        Returns:
            Tuple of the page position and the page items

        Raises:
            PagerExhaustedError: If the last page was already returned
            ResultsNotFoundError: If the fetched page has no items
            FetchFailedError: If the page source failed
        """
        if self.exhausted:
            raise PagerExhaustedError()

        page = self._fetch()
        if not page.items:
            self.exhausted = True
            raise ResultsNotFoundError(offset=self.offset, total=page.total)

        first = not self.fetched_any
        last = self.offset + len(page.items) >= page.total
        position = Position.classify(first, last)

        self.logger.debug(
            f"Page at offset {self.offset}: {len(page.items)} items "
            f"of {page.total}, position {position.value}"
        )

        self.fetched_any = True
        self.total_seen = page.total
        self.offset += len(page.items)
        self.exhausted = last
        return position, page.items

    def pages(self) -> Iterator[Tuple[Position, List[Document]]]:
        """Yield pages until the terminal one has been returned"""
        while not self.exhausted:
            yield self.next_page()

    def _fetch(self) -> Page:
        self.logger.debug(f"Fetching page offset={self.offset} limit={self.limit}")
        try:
            return self.source.fetch(self.offset, self.limit)
        except ExportError:
            self.exhausted = True
            raise
        except Exception as e:
            self.exhausted = True
            raise FetchFailedError(f"Failed to fetch page: {str(e)}", original_error=e) from e
