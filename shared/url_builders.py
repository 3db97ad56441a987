"""
URL builders for the hosted HumanCode authentication page — pure functions.

Values are interpolated verbatim; no percent-encoding is applied, so callers
must pass URL-safe session ids, human ids and callback URLs.
"""

from __future__ import annotations

from typing import Optional

from shared.datetime_utils import now_ms

_AUTH_PAGE_PATH = "/authentication/index.html"


def build_registration_url(
    base_url: str,
    session_id: str,
    callback_url: str,
    ts: Optional[int] = None,
) -> str:
    """Build the URL that sends a user to register with HumanCode.

    Args:
        base_url: Remote base URL without trailing slash.
        session_id: Session id returned by the session endpoint.
        callback_url: Where the hosted page redirects afterwards.
        ts: Millisecond timestamp (defaults to now).
    """
    if ts is None:
        ts = now_ms()
    return (
        f"{base_url}{_AUTH_PAGE_PATH}"
        f"?session_id={session_id}&callback_url={callback_url}&ts={ts}#/"
    )


def build_verification_url(
    base_url: str,
    session_id: str,
    human_id: str,
    callback_url: str,
    ts: Optional[int] = None,
) -> str:
    """Build the URL that asks an already registered human to verify.

    Same template as :func:`build_registration_url` with ``human_id`` placed
    right after ``session_id``.
    """
    if ts is None:
        ts = now_ms()
    return (
        f"{base_url}{_AUTH_PAGE_PATH}"
        f"?session_id={session_id}&human_id={human_id}"
        f"&callback_url={callback_url}&ts={ts}#/"
    )
