#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
WikiSummary — FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wikisummary.core.config import get_settings
from wikisummary.routes import render

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    logging.getLogger("wikisummary").setLevel(level.upper())


# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Renders wikitext edit summaries and change-tag labels as safe HTML.",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # ── CORS ──────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── API routers ───────────────────────────────────────────────────────

    prefix = "/api/v1"

    app.include_router(render.router, prefix=prefix)

    # ── Error handlers ────────────────────────────────────────────────────

    @app.exception_handler(404)
    async def not_found(request: Request, exc):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Not found"},
        )

    @app.exception_handler(500)
    async def server_error(request: Request, exc):
        log.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"])
    async def health():
        return {"status": "ok", "version": settings.app_version, "app": settings.app_name}

    log.debug("Application created (environment=%s)", settings.environment)
    return app


# -----------------------------------------------------------------------------

app = create_app()


# -----------------------------------------------------------------------------
