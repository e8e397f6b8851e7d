"""
Page sources for the two paging schemes.

Both adapt a marketplace client to the PageSource contract: they compose the
query arguments for the scheme and turn the raw paged response into a Page.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from mlexport.constants import ORDERS_ARGS, SEARCH_ARGS
from .errors import FetchFailedError
from .pager import Page


def filter_args(args: Optional[Mapping[str, Any]], valid_names: Iterable[str]) -> Dict[str, Any]:
    """Keep only the arguments a paging scheme accepts, dropping None values"""
    if not args:
        return {}
    valid = set(valid_names)
    return {
        name: value
        for name, value in args.items()
        if name in valid and value is not None
    }


def page_from_response(data: Any, offset: int, limit: int) -> Page:
    """
    Build a Page from a ``{"paging": ..., "results": [...]}`` response.

    Args:
        data: Decoded response body
        offset: Offset that was requested
        limit: Limit that was requested

    Returns:
        Page with the reported total and the result items
    """
    if not isinstance(data, dict):
        raise FetchFailedError("Unexpected response: body is not an object")

    results = data.get("results")
    if results is None:
        results = []
    if not isinstance(results, list):
        raise FetchFailedError("Unexpected response: 'results' is not an array")

    paging = data.get("paging") or {}
    total = paging.get("total")
    if not isinstance(total, int):
        # Without a total, only a short page can end the stream
        total = offset + len(results) + (1 if len(results) >= limit else 0)

    return Page(total=total, offset=offset, limit=limit, items=results)


class SearchPageSource:
    """Fetches item search results for a site"""

    def __init__(self, client, site_id: str, args: Optional[Mapping[str, Any]] = None):
        self.client = client
        self.site_id = site_id
        self.args = filter_args(args, SEARCH_ARGS)

    def fetch(self, offset: int, limit: int) -> Page:
        data = self.client.search(self.site_id, offset=offset, limit=limit, **self.args)
        return page_from_response(data, offset, limit)


class OrdersPageSource:
    """Fetches the orders of the authenticated seller"""

    def __init__(self, client, args: Optional[Mapping[str, Any]] = None):
        self.client = client
        self.args = filter_args(args, ORDERS_ARGS)

    def fetch(self, offset: int, limit: int) -> Page:
        data = self.client.my_orders(offset=offset, limit=limit, **self.args)
        return page_from_response(data, offset, limit)
