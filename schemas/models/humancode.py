"""
Wire models for the HumanCode API.

ClientResponse[T] is the generic ``{code, msg, result}`` envelope every
endpoint answers with; ``code == 0`` means success.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class SessionResult(BaseModel):
    """``result`` payload of POST /api/session/v2/get_id."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    session_id: str


class VerifyResult(BaseModel):
    """``result`` payload of POST /api/vcode/v2/verify."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    human_id: str


class ClientResponse(BaseModel, Generic[T]):
    """Response envelope returned by the HumanCode API."""

    model_config = ConfigDict(extra="ignore")

    code: int
    msg: Optional[str] = None
    result: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.code == 0
