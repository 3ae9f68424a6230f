#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoints

GET  /api/v1/render?text=...&external_links=false   — live preview of one snippet
POST /api/v1/render/summary                         — summary + tag labels for one edit
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from wikisummary.schemas import (
    MAX_TEXT_LENGTH,
    PreviewResponse,
    SummaryRenderRequest,
    SummaryRenderResponse,
)
from wikisummary.services.converter import convert
from wikisummary.services.summaries import render_summary, render_tag_labels
from wikisummary.services.wiki import WikiUrlResolver, page_title


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

@router.get("", response_model=PreviewResponse)
async def render_preview(
    text:           str           = Query(default="", max_length=MAX_TEXT_LENGTH),
    external_links: bool          = Query(default=False),
    lang:           Optional[str] = Query(default=None, pattern=r"^[a-z][a-z0-9-]{0,31}$"),
    project:        Optional[str] = Query(default=None, pattern=r"^[a-z]{2,32}$"),
    page:           str           = Query(default="", max_length=255),
):
    """Return HTML for a single snippet — used by the summary editor preview."""
    resolver = WikiUrlResolver(lang, project)
    html = convert(text, external_links, resolver, page_title(page, underscored=True))
    return PreviewResponse(html=html, external_links=external_links)


# -----------------------------------------------------------------------------

@router.post("/summary", response_model=SummaryRenderResponse)
async def render_edit_summary(data: SummaryRenderRequest):
    resolver = WikiUrlResolver(data.lang, data.project)
    title    = page_title(data.page_title, data.page_namespace, underscored=True)
    return SummaryRenderResponse(
        summary=render_summary(data.comment, resolver, title),
        tag_labels=render_tag_labels(data.tags_labels, resolver, title),
        page_url=resolver(title),
    )


# -----------------------------------------------------------------------------
