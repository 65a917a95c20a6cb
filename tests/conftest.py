"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sl10n.core.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are read from the environment; never leak them across tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
