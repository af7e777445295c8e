"""Shared pytest configuration and fixtures for regexcatalog tests.

Every test starts from fresh settings and freshly built catalogs, so
environment overrides applied with ``monkeypatch`` take effect and never leak
between tests.
"""
from __future__ import annotations

import pytest

from regexcatalog.config import get_settings
from regexcatalog.core import registry


def _clear_caches() -> None:
    get_settings.cache_clear()
    registry.get_catalog.cache_clear()
    registry._build_legacy_catalog.cache_clear()
    registry._get_compiler.cache_clear()


@pytest.fixture(autouse=True)
def fresh_catalog(monkeypatch):
    """Isolate each test from ``REGEXCATALOG_*`` variables and cached state."""
    monkeypatch.delenv("REGEXCATALOG_SELF_CHECK", raising=False)
    monkeypatch.delenv("REGEXCATALOG_LEGACY_WARNING", raising=False)
    monkeypatch.delenv("REGEXCATALOG_COMPILE_CACHE_SIZE", raising=False)
    _clear_caches()
    yield
    _clear_caches()
