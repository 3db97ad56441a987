"""HumanCode implementation of HumanVerificationProvider.

Every call posts a compact JSON body and signs those exact bytes with the
application key; the remote side recomputes the HMAC over the raw body, so
the bytes must never be re-serialized between signing and sending.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from config import HumanCodeSettings
from errors import ApiError, TransportError
from infrastructure.http_client import HttpClient
from schemas.models.humancode import ClientResponse, SessionResult, VerifyResult
from shared.crypto import sign
from shared.datetime_utils import now_ms
from shared.logging import get_logger
from shared.url_builders import build_registration_url, build_verification_url

log = get_logger(__name__)

_SESSION_PATH = "/api/session/v2/get_id"
_VERIFY_PATH = "/api/vcode/v2/verify"

ResultT = TypeVar("ResultT", bound=BaseModel)


def serialize_body(payload: dict[str, Any]) -> bytes:
    """Serialize *payload* to the compact UTF-8 JSON that is signed and sent."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


class HumanCodeClient:
    def __init__(self, settings: HumanCodeSettings, http_client: HttpClient) -> None:
        self._settings = settings
        self._http = http_client

    def get_config(self) -> HumanCodeSettings:
        return self._settings

    async def get_session_id(self, nonce: str) -> SessionResult:
        body = {"timestamp": str(now_ms()), "nonce_str": nonce}
        return await self._post_signed(_SESSION_PATH, body, SessionResult)

    async def verify(self, session_id: str, vcode: str, nonce: str) -> VerifyResult:
        body = {
            "session_id": session_id,
            "vcode": vcode,
            "timestamp": str(now_ms()),
            "nonce_str": nonce,
        }
        return await self._post_signed(_VERIFY_PATH, body, VerifyResult)

    def gen_registration_url(self, session_id: str, callback_url: str) -> str:
        return build_registration_url(self._settings.base_url, session_id, callback_url)

    def gen_verification_url(
        self, session_id: str, human_id: str, callback_url: str
    ) -> str:
        return build_verification_url(
            self._settings.base_url, session_id, human_id, callback_url
        )

    async def _post_signed(
        self, path: str, payload: dict[str, Any], result_type: type[ResultT]
    ) -> ResultT:
        content = serialize_body(payload)
        params = {
            "app_id": self._settings.app_id,
            "sign": sign(self._settings.app_key, content),
        }
        try:
            response = await self._http.post(path, params=params, content=content)
        except httpx.HTTPError as e:
            log.error(
                "humancode_request_failed",
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(f"request failed: {e}") from e
        return self._unwrap(path, response, result_type)

    def _unwrap(
        self, path: str, response: httpx.Response, result_type: type[ResultT]
    ) -> ResultT:
        try:
            envelope = ClientResponse[result_type].model_validate_json(response.content)
        except PydanticValidationError as e:
            log.error(
                "humancode_malformed_response",
                path=path,
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            if not response.is_success:
                raise TransportError(f"HTTP error: {response.status_code}") from e
            raise TransportError("malformed response body") from e

        if not response.is_success or not envelope.ok:
            log.warning(
                "humancode_api_error",
                path=path,
                status_code=response.status_code,
                api_code=envelope.code,
                msg=envelope.msg,
            )
            raise ApiError(
                envelope.msg or f"API error: code {envelope.code}",
                details={"api_code": envelope.code},
            )

        if envelope.result is None:
            log.error("humancode_missing_result", path=path)
            raise TransportError("response missing result")

        return envelope.result
