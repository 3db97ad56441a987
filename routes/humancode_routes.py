"""
HumanCode proxy endpoints.

GET /                 — liveness ping, empty 200
GET /getSessionId     — obtain a session id from the remote API
GET /registrationUrl  — new session + hosted registration page URL
GET /verificationUrl  — new session + hosted verification page URL
GET /verify           — check the code the hosted page handed back

The app key never leaves the server; browsers only ever see session ids,
URLs and the resulting human id.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import PlainTextResponse

from config import AppSettings
from dependencies import get_humancode, get_nonce, get_settings
from errors import ValidationError
from infrastructure.humancode.protocol import HumanVerificationProvider
from schemas.dto.responses.common import ErrorResponse
from schemas.dto.responses.humancode import SessionIdResponse, VerifyResponse
from shared.logging import get_logger

log = get_logger(__name__)

router = APIRouter(
    tags=["humancode"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("/")
async def index() -> Response:
    return Response(status_code=200)


@router.get("/getSessionId", response_model=SessionIdResponse)
async def get_session_id(
    nonce: str = Depends(get_nonce),
    humancode: HumanVerificationProvider = Depends(get_humancode),
) -> SessionIdResponse:
    result = await humancode.get_session_id(nonce)
    log.info("session_id_obtained", session_id=result.session_id)
    return SessionIdResponse(session_id=result.session_id)


@router.get("/registrationUrl", response_class=PlainTextResponse)
async def registration_url(
    nonce: str = Depends(get_nonce),
    humancode: HumanVerificationProvider = Depends(get_humancode),
    settings: AppSettings = Depends(get_settings),
) -> str:
    session = await humancode.get_session_id(nonce)
    return humancode.gen_registration_url(
        session.session_id, settings.humancode.callback_url
    )


@router.get("/verificationUrl", response_class=PlainTextResponse)
async def verification_url(
    human_id: Optional[str] = Query(default=None),
    nonce: str = Depends(get_nonce),
    humancode: HumanVerificationProvider = Depends(get_humancode),
    settings: AppSettings = Depends(get_settings),
) -> str:
    if not human_id:
        human_id = settings.humancode.placeholder_human_id
        log.warning("verification_url_placeholder_human_id", human_id=human_id)
    session = await humancode.get_session_id(nonce)
    return humancode.gen_verification_url(
        session.session_id, human_id, settings.humancode.callback_url
    )


@router.get(
    "/verify",
    response_model=VerifyResponse,
    responses={400: {"model": ErrorResponse}},
)
async def verify(
    session_id: str = Query(...),
    vcode: str = Query(...),
    error_code: int = Query(...),
    nonce: str = Depends(get_nonce),
    humancode: HumanVerificationProvider = Depends(get_humancode),
) -> VerifyResponse:
    # The hosted page reports its own failures through error_code
    if error_code != 0:
        log.info("verify_rejected_by_page", error_code=error_code)
        raise ValidationError(f"Error code: {error_code}", field="error_code")
    result = await humancode.verify(session_id, vcode, nonce)
    log.info("human_verified", human_id=result.human_id)
    return VerifyResponse(human_id=result.human_id)
