#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from wikisummary._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "WikiSummary"
    app_version: str = _pkg_version
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"
    log_level: str = "INFO"

    # ── Wiki defaults ──────────────────────────────────────────────────────

    default_lang: str = "en"
    default_project: str = "wikipedia"
    drafts_namespace: int = 118

    # ── CORS ───────────────────────────────────────────────────────────────

    cors_origins: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
    ]


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
