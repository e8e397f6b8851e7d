"""
Marketplace API access.
"""

from .client import MarketplaceClient

__all__ = ["MarketplaceClient"]
