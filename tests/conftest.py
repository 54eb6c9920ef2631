"""
Pytest configuration and fixtures.
"""

import pytest

from junket.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings so each test sees its own environment."""
    for name in (
        "LOG_LEVEL",
        "BASE_CURRENCY",
        "LEGACY_AGENT_SHARE_PERCENTAGE",
        "CASH_FLOW_WARNING_RATIO",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
