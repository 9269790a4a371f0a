"""
Pytest configuration for the extraction tests.
"""
import pytest

from tradeparser.app.config import get_settings
from tradeparser.app.extraction.registry import BrokerRegistry


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Settings come from defaults only, never from a developer's .env or environment."""
    for name in ("LOG_LEVEL", "SUPPORTED_EXTENSION", "DOCUMENT_TIMEZONE", "AMOUNT_TOLERANCE", "STATEMENTS_ROOT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry():
    return BrokerRegistry()
