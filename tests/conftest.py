"""Shared pytest configuration and fixtures for the mlexport test suite.

This module provides:
- Isolated config and log directories
- A list-backed page source factory
- Sample search and order documents
"""
import sys
from pathlib import Path
from unittest.mock import patch

import pytest


# Add src/ to path so test modules can import mlexport package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from mlexport.export import FunctionPageSource, Page  # noqa: E402
from mlexport.logging import LogConfig, setup_logging  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def isolated_logging(tmp_path_factory):
    """Send log files to a temporary directory for the whole session."""
    log_file = tmp_path_factory.mktemp("logs") / "mlexport.log"
    with patch("mlexport.logging.logger.get_log_file_path", return_value=log_file):
        setup_logging(LogConfig(), force_reconfigure=True)
    yield log_file


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep ConfigStore away from the real user config directory."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return config_home


@pytest.fixture
def make_source():
    """Build a page source serving `docs` in windows.

    `total` overrides the reported total; `empty_from` makes every fetch
    at or beyond that offset return no items. Calls are recorded on the
    returned source as `calls`.
    """

    def _make(docs, total=None, empty_from=None):
        calls = []

        def fetch(offset, limit):
            calls.append((offset, limit))
            items = docs[offset:offset + limit]
            if empty_from is not None and offset >= empty_from:
                items = []
            reported = len(docs) if total is None else total
            return Page(total=reported, offset=offset, limit=limit, items=items)

        source = FunctionPageSource(fetch)
        source.calls = calls
        return source

    return _make


@pytest.fixture
def search_doc():
    """A search result document."""
    return {
        "id": "MLA123",
        "sold_quantity": 7,
        "price": 10.5,
        "currency_id": "ARS",
        "seller": {"id": 42, "power_seller_status": None},
        "listing_type_id": "gold_special",
        "title": "Widget",
        "subtitle": None,
        "stop_time": "2026-12-01T00:00:00.000Z",
        "permalink": "https://articulo.example.com/MLA123",
        "accepts_mercadopago": True,
    }


@pytest.fixture
def order_doc():
    """An order document with one item."""
    return {
        "id": 9001,
        "date_created": "2026-03-01T10:00:00.000-03:00",
        "buyer": {
            "nickname": "BUYER1",
            "first_name": "Ana",
            "last_name": "Perez",
            "email": "ana@example.com",
            "phone": {"area_code": "11", "number": "5555-1234"},
        },
        "feedback": {
            "sent": {
                "date_created": "2026-03-05T10:00:00.000-03:00",
                "concretion_status": "completed",
            }
        },
        "order_items": [
            {
                "item": {"id": "MLA123", "title": "Widget"},
                "quantity": 2,
                "unit_price": 10.5,
                "currency_id": "ARS",
            }
        ],
    }


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, isolated)"
    )


def pytest_collection_modifyitems(config, items):
    """Mark every test as a unit test."""
    for item in items:
        item.add_marker(pytest.mark.unit)
