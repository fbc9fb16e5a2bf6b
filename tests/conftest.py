#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for LoreWiki tests.
Every test starts with no shared sanitizer so initialisation is exercised fresh.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lorewiki.core.config import get_settings
from lorewiki.main import create_app
from lorewiki.services.sanitizer import reset_sanitizer


# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_sanitizer():
    reset_sanitizer()
    yield
    reset_sanitizer()


@pytest.fixture
def settings():
    """The cached Settings instance; tweak it with monkeypatch.setattr."""
    return get_settings()


@pytest.fixture
def broken_parser(monkeypatch, settings):
    """Point the sanitizer at a tree builder that is not installed."""
    monkeypatch.setattr(settings, "html_parser", "no-such-tree-builder")


@pytest_asyncio.fixture(scope="function")
async def client():
    """HTTP test client wired to a fresh app instance."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
