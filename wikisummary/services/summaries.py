#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Edit summaries and change-tag labels.

Summaries are written by editors, so masked external links are left alone.
Tag labels come from the wiki's own interface messages and get full link
handling.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from wikisummary.services.converter import PageUrlResolver, convert


# -----------------------------------------------------------------------------

def render_summary(
    comment: Optional[str],
    resolve_page_url: PageUrlResolver,
    page_title: str = "",
) -> str:
    return convert(comment or "", False, resolve_page_url, page_title)


def render_tag_labels(
    labels: Optional[Iterable[str]],
    resolve_page_url: PageUrlResolver,
    page_title: str = "",
) -> list[str]:
    return [convert(label, True, resolve_page_url, page_title) for label in labels or []]


# -----------------------------------------------------------------------------
