"""
Export commands module.

One command per paging scheme: item search results and seller orders.
"""

from .manager import app

__all__ = ["app"]
