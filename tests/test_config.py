import logging
from decimal import Decimal
from pathlib import Path

import pytest

from tradeparser.app.config import PROJECT_ROOT, get_settings
from tradeparser.config import setup_logging


@pytest.fixture
def root_logger():
    """setup_logging replaces the root handlers, put the test run's back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults():
    settings = get_settings()
    assert settings.supported_extension == "pdf"
    assert settings.document_timezone == "Europe/Berlin"
    assert settings.amount_tolerance == Decimal("0.01")


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SUPPORTED_EXTENSION", ".PDF")
    monkeypatch.setenv("AMOUNT_TOLERANCE", "0.05")
    monkeypatch.setenv("STATEMENTS_ROOT", "statements")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.supported_extension == "pdf"
    assert settings.amount_tolerance == Decimal("0.05")
    assert settings.statements_root == (PROJECT_ROOT / "statements").resolve()


def test_absolute_statements_root(monkeypatch, tmp_path):
    monkeypatch.setenv("STATEMENTS_ROOT", str(tmp_path))
    get_settings.cache_clear()
    assert get_settings().statements_root == Path(tmp_path)


def test_setup_logging_level_from_settings(monkeypatch, root_logger):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()
    setup_logging()
    assert root_logger.level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info(root_logger):
    setup_logging("verbose")
    assert root_logger.level == logging.INFO
    setup_logging(logging.WARNING)
    assert root_logger.level == logging.WARNING
