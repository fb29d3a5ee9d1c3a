"""Pytest configuration and shared fixtures for rulechain tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from rulechain.settings import configure, reset_settings  # noqa: E402

REFERENCE_DATE = date(2024, 6, 1)


@pytest.fixture(autouse=True)
def pinned_settings():
    """Pin the reference date so expiration checks do not depend on the wall clock."""
    reset_settings()
    configure(reference_date=REFERENCE_DATE)
    yield
    reset_settings()


@pytest.fixture
def reference_date():
    return REFERENCE_DATE


@pytest.fixture
def purchase():
    """A purchase with duplicate SKUs and a malformed user email."""
    return {
        "products": [
            {"sku": "A-1", "name": "Keyboard", "price": 40},
            {"sku": "B-2", "name": "Mouse", "price": 15},
            {"sku": "A-1", "name": "Keyboard", "price": 40},
        ],
        "user": "not-an-email",
    }
