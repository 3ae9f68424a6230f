#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for WikiSummary tests.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wikisummary.main import create_app
from wikisummary.services.wiki import WikiUrlResolver


# -----------------------------------------------------------------------------

@pytest.fixture
def enwiki() -> WikiUrlResolver:
    return WikiUrlResolver("en", "wikipedia")


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
# Helper functions for tests
# -----------------------------------------------------------------------------

_GENERATED_TAG_RE = re.compile(r'<a target="_blank"[^<>]*>|</a>|<em class="text-muted">|</em>')


def strip_generated_tags(html: str) -> str:
    """Drop the tags the converter writes itself; whatever is left is user text."""
    return _GENERATED_TAG_RE.sub("", html)


class RecordingResolver:
    """Resolver that remembers every title it was asked for."""

    def __init__(self, base: str = "https://en.wikipedia.org/wiki/"):
        self.base  = base
        self.calls: list[str] = []

    def __call__(self, title: str) -> str:
        self.calls.append(title)
        return self.base + title


# -----------------------------------------------------------------------------
