"""
FastAPI dependency providers.

All injectable dependencies are defined here as plain functions used with
FastAPI's Depends() system.
"""

from __future__ import annotations

from typing import AsyncIterator

import structlog
from fastapi import Request

from config import AppSettings
from infrastructure.humancode.protocol import HumanVerificationProvider
from shared.generators import generate_nonce


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_humancode(request: Request) -> HumanVerificationProvider:
    """Return the process-wide HumanCode client from app.state."""
    return request.app.state.humancode


async def get_nonce() -> AsyncIterator[str]:
    """Yield a fresh nonce for this request.

    The nonce is bound into structlog's context for the lifetime of the
    request so every log line of one call can be correlated.
    """
    nonce = generate_nonce()
    with structlog.contextvars.bound_contextvars(nonce=nonce):
        yield nonce
