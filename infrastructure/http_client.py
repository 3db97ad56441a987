"""Shared async HTTP client with explicit base URL, headers and timeout."""

from typing import Any, Optional

import httpx

from shared.logging import get_logger

log = get_logger(__name__)


async def _log_request(request: httpx.Request) -> None:
    log.debug(
        "outbound_request",
        method=request.method,
        host=request.url.host,
        path=request.url.path,
        body=request.content.decode("utf-8", errors="replace"),
    )


async def _log_response(response: httpx.Response) -> None:
    await response.aread()
    log.debug(
        "outbound_response",
        status_code=response.status_code,
        body=response.text[:1000],
    )


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient.

    One instance per external service keeps base URL, default headers and
    timeouts independently configurable. With ``debug`` on every request and
    response is logged (query strings are dropped so signatures stay out of
    the logs).
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        headers: Optional[dict[str, str]] = None,
        timeout: float = 5.0,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        event_hooks: dict[str, list] = {"request": [], "response": []}
        if debug:
            event_hooks = {"request": [_log_request], "response": [_log_response]}
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            event_hooks=event_hooks,
            transport=transport,
        )

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
