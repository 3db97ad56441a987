"""
Shared fixtures for unit and integration tests.

pydantic-settings never reads the project's real .env file during tests and
HUMANCODE_* variables from the developer's shell are cleared, so tests
control config exclusively through monkeypatch.setenv() or explicit kwargs.
"""

from __future__ import annotations

import os

import pytest
import structlog
from structlog.testing import LogCapture

from config import AppSettings, HumanCodeSettings, LoggingSettings
from tests.stubs import APP_ID, APP_KEY, BASE_URL, CALLBACK_URL, RemoteStub


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})
    for var in list(os.environ):
        if var.startswith("HUMANCODE_"):
            monkeypatch.delenv(var)


@pytest.fixture
def remote() -> RemoteStub:
    return RemoteStub()


@pytest.fixture
def humancode_settings() -> HumanCodeSettings:
    return HumanCodeSettings(
        app_id=APP_ID,
        app_key=APP_KEY,
        base_url=BASE_URL,
        callback_url=CALLBACK_URL,
    )


@pytest.fixture
def app_settings(humancode_settings) -> AppSettings:
    return AppSettings(humancode=humancode_settings, logging=LoggingSettings())


@pytest.fixture
def captured_logs(monkeypatch):
    """Route structlog output into a LogCapture, request context included.

    Module-level loggers may already be cached by an earlier create_app(),
    so the modules under test get fresh uncached loggers for the duration.
    """
    import infrastructure.http_client as http_client_module
    import infrastructure.humancode.client as humancode_client_module
    import routes.humancode_routes as humancode_routes_module

    capture = LogCapture()
    structlog.reset_defaults()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, capture],
        cache_logger_on_first_use=False,
    )
    for module in (http_client_module, humancode_client_module, humancode_routes_module):
        monkeypatch.setattr(module, "log", structlog.get_logger(module.__name__))
    yield capture
    structlog.reset_defaults()
