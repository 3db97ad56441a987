"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import AppSettings
from errors import register_error_handlers
from infrastructure.http_client import HttpClient
from infrastructure.humancode.client import HumanCodeClient
from routes.health_routes import router as health_router
from routes.humancode_routes import router as humancode_router
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create and return a fully configured FastAPI application."""
    if settings is None:
        settings = AppSettings()

    # Configure logging before anything else so startup errors are rendered
    setup_logging(settings.logging)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        hc = settings.humancode
        http_client = HttpClient(
            hc.base_url,
            headers={"Content-Type": "application/json"},
            timeout=hc.timeout_seconds,
            debug=hc.debug,
        )
        app.state.settings = settings
        app.state.http_client = http_client
        app.state.humancode = HumanCodeClient(hc, http_client)

        log.info(
            "humancode_client_ready",
            base_url=hc.base_url,
            app_id=hc.app_id,
            debug=hc.debug,
        )

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        await http_client.aclose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=None if settings.is_production else settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    # all origins allowed with credentials support.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(humancode_router)

    return app
