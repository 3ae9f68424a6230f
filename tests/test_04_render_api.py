#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the render API endpoints."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
from httpx import AsyncClient


# =============================================================================
# System
# =============================================================================

@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_unknown_api_path_is_json_404(client: AsyncClient):
    resp = await client.get("/api/v1/nope")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not found"}


# =============================================================================
# GET /render
# =============================================================================

@pytest.mark.asyncio
async def test_preview_renders_links(client: AsyncClient):
    resp = await client.get("/api/v1/render", params={"text": "see [[foo]] at http://example.com"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["external_links"] is False
    assert 'href="https://en.wikipedia.org/wiki/Foo">foo</a>' in data["html"]
    assert 'href="http://example.com">http://example.com</a>' in data["html"]


@pytest.mark.asyncio
async def test_preview_external_links_flag(client: AsyncClient):
    params = {"text": "[http://example.com Example]", "external_links": "true"}
    resp = await client.get("/api/v1/render", params=params)
    assert resp.status_code == 200
    assert resp.json()["html"] == (
        '<a target="_blank" rel="nofollow" href="http://example.com">Example</a>'
    )


@pytest.mark.asyncio
async def test_preview_other_wiki(client: AsyncClient):
    params = {"text": "/* Geschichte */", "lang": "de", "project": "wikipedia", "page": "Berlin"}
    resp = await client.get("/api/v1/render", params=params)
    assert resp.status_code == 200
    assert 'href="https://de.wikipedia.org/wiki/Berlin#Geschichte"' in resp.json()["html"]


@pytest.mark.asyncio
async def test_preview_rejects_bad_lang(client: AsyncClient):
    resp = await client.get("/api/v1/render", params={"text": "x", "lang": "evil.com/"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_preview_rejects_oversized_text(client: AsyncClient):
    resp = await client.get("/api/v1/render", params={"text": "a" * 2001})
    assert resp.status_code == 422


# =============================================================================
# POST /render/summary
# =============================================================================

@pytest.mark.asyncio
async def test_summary_endpoint(client: AsyncClient):
    resp = await client.post("/api/v1/render/summary", json={
        "comment": "/* History */ see [[foo]] [http://example.com spam]",
        "tags_labels": ["[http://example.com/tag Tag label]"],
        "page_title": "Some_page",
    })
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["page_url"] == "https://en.wikipedia.org/wiki/Some_page"
    assert 'href="https://en.wikipedia.org/wiki/Some_page#History"' in data["summary"]
    assert ">spam</a>" not in data["summary"]
    assert data["tag_labels"] == [
        '<a target="_blank" rel="nofollow" href="http://example.com/tag">Tag label</a>',
    ]


@pytest.mark.asyncio
async def test_summary_endpoint_draft_page(client: AsyncClient):
    resp = await client.post("/api/v1/render/summary", json={
        "comment": "/* Lead */",
        "page_title": "My_article",
        "page_namespace": 118,
        "lang": "fr",
    })
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["page_url"] == "https://fr.wikipedia.org/wiki/Draft:My_article"
    assert "Draft:My_article#Lead" in data["summary"]
    assert data["tag_labels"] == []


@pytest.mark.asyncio
async def test_summary_endpoint_null_comment(client: AsyncClient):
    resp = await client.post("/api/v1/render/summary", json={"comment": None})
    assert resp.status_code == 200
    assert resp.json()["summary"] == ""


@pytest.mark.asyncio
async def test_summary_endpoint_rejects_bad_project(client: AsyncClient):
    resp = await client.post("/api/v1/render/summary", json={"comment": "x", "project": "wiki pedia"})
    assert resp.status_code == 422


# -----------------------------------------------------------------------------
