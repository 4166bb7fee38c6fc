"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from web.backend.config import get_config


@pytest.fixture(autouse=True)
def _clear_cached_config():
    """Keep the cached AppConfig from leaking between tests."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()
