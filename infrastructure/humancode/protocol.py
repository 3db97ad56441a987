"""HumanVerificationProvider protocol — routes depend on this, not the concrete client."""

from typing import Protocol

from schemas.models.humancode import SessionResult, VerifyResult


class HumanVerificationProvider(Protocol):
    async def get_session_id(self, nonce: str) -> SessionResult: ...

    async def verify(self, session_id: str, vcode: str, nonce: str) -> VerifyResult: ...

    def gen_registration_url(self, session_id: str, callback_url: str) -> str: ...

    def gen_verification_url(
        self, session_id: str, human_id: str, callback_url: str
    ) -> str: ...
