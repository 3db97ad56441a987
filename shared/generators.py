"""
Random identifier generators — pure, side-effect-free functions.
"""

from __future__ import annotations

import uuid


def generate_nonce() -> str:
    """Generate a fresh request nonce (random UUID4 string).

    The nonce doubles as the correlation id for one inbound request and is
    sent to the remote API as ``nonce_str`` so it can reject replays.
    """
    return str(uuid.uuid4())
