"""
Response DTOs for the HumanCode proxy endpoints.

SessionIdResponse — GET /getSessionId  (200)
VerifyResponse    — GET /verify  (200)

/registrationUrl and /verificationUrl answer with a bare text/plain URL and
have no DTO.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SessionIdResponse(BaseModel):
    """Session id handed to the browser before it opens the hosted page."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str


class VerifyResponse(BaseModel):
    """Identity of the human that completed the verification."""

    model_config = ConfigDict(populate_by_name=True)

    human_id: str
