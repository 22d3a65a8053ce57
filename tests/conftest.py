"""Shared fixtures for order lifecycle tests."""
import pytest

from core.domain import Item
from core.settings import get_order_settings


@pytest.fixture
def mock_items():
    """Mouse + keyboard, total 350."""
    return [
        Item(1, "Mouse", 100),
        Item(2, "Teclado", 250),
    ]


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ORDER_DEFAULT_PAYMENT_METHOD", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_order_settings.cache_clear()
    yield
    get_order_settings.cache_clear()
