"""
Cryptographic helpers — request signing for the HumanCode API.

The remote API authenticates every call with an HMAC-SHA256 signature of the
raw JSON body, keyed by the application key and passed as the ``sign`` query
parameter.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Union

BytesOrStr = Union[bytes, str]


def _to_bytes(value: BytesOrStr) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


def sign(secret: BytesOrStr, message: BytesOrStr) -> str:
    """Return the HMAC-SHA256 signature of *message* keyed by *secret*.

    ``str`` arguments are UTF-8 encoded first, so signing the serialized body
    or its encoded bytes yields the same result.

    Args:
        secret: The application key.
        message: The exact request body that goes on the wire.

    Returns:
        64-character lowercase hex string.
    """
    return hmac.new(_to_bytes(secret), _to_bytes(message), hashlib.sha256).hexdigest()
