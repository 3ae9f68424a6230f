#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# -----------------------------------------------------------------------------

MAX_TEXT_LENGTH = 2_000

_LANG_PATTERN    = r"^[a-z][a-z0-9-]{0,31}$"
_PROJECT_PATTERN = r"^[a-z]{2,32}$"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SummaryRenderRequest(BaseModel):
    comment: Optional[str] = Field(default="", max_length=MAX_TEXT_LENGTH)
    tags_labels: list[str] = Field(default_factory=list, max_length=50)
    page_title: str = Field(default="", max_length=255)
    page_namespace: int = Field(default=0, ge=0)
    lang: Optional[str] = Field(default=None, pattern=_LANG_PATTERN)
    project: Optional[str] = Field(default=None, pattern=_PROJECT_PATTERN)

    @field_validator("tags_labels")
    @classmethod
    def labels_not_too_long(cls, v: list[str]) -> list[str]:
        for label in v:
            if len(label) > MAX_TEXT_LENGTH:
                raise ValueError(f"Tag label longer than {MAX_TEXT_LENGTH} characters")
        return v


# -----------------------------------------------------------------------------

class SummaryRenderResponse(BaseModel):
    summary: str
    tag_labels: list[str]
    page_url: str


# -----------------------------------------------------------------------------

class PreviewResponse(BaseModel):
    html: str
    external_links: bool
