"""
Unit tests for the shared/ utility modules.

Covers:
- shared.crypto          (sign)
- shared.url_builders    (build_registration_url, build_verification_url)
- shared.generators      (generate_nonce)
- shared.datetime_utils  (now_ms)
- shared.logging         (redact_sensitive_fields, configure_structlog)
"""

from __future__ import annotations

import hashlib
import hmac
import re
import time
import uuid
import warnings

import pytest
import structlog

from shared.crypto import sign
from shared.datetime_utils import now_ms
from shared.generators import generate_nonce
from shared.logging import configure_structlog, redact_sensitive_fields
from shared.url_builders import build_registration_url, build_verification_url

_HEX64 = re.compile(r"^[0-9a-f]{64}$")


# ---------------------------------------------------------------------------
# shared.crypto — sign
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "secret, message",
    [
        (b"key", b"The quick brown fox jumps over the lazy dog"),
        (b"", b""),
        (b"\x00\xff" * 40, b'{"timestamp":"1700000000000","nonce_str":"n"}'),
        ("ключ", "тело"),
    ],
    ids=["ascii", "empty", "long_binary_key", "unicode"],
)
def test_sign_is_64_lowercase_hex(secret, message):
    assert _HEX64.match(sign(secret, message))


def test_sign_known_vector():
    # Published HMAC-SHA256 example vector
    assert (
        sign(b"key", b"The quick brown fox jumps over the lazy dog")
        == "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"
    )


def test_sign_is_deterministic():
    assert sign(b"k", b"body") == sign(b"k", b"body")


def test_sign_str_and_bytes_agree():
    body = '{"vcode":"123456","nonce_str":"é"}'
    assert sign("secret", body) == sign(b"secret", body.encode("utf-8"))


def test_sign_matches_hmac_sha256():
    expected = hmac.new(b"s", b"m", hashlib.sha256).hexdigest()
    assert sign(b"s", b"m") == expected


def test_sign_depends_on_secret_and_message():
    assert sign(b"a", b"m") != sign(b"b", b"m")
    assert sign(b"a", b"m") != sign(b"a", b"n")


# ---------------------------------------------------------------------------
# shared.url_builders
# ---------------------------------------------------------------------------


class TestBuildRegistrationUrl:
    def test_exact_shape(self):
        url = build_registration_url(
            "https://hc.test", "sid-1", "https://example.com/cb", ts=1700000000000
        )
        assert url == (
            "https://hc.test/authentication/index.html"
            "?session_id=sid-1&callback_url=https://example.com/cb"
            "&ts=1700000000000#/"
        )

    @pytest.mark.parametrize(
        "session_id, callback_url",
        [("abc123", "https://example.com/verify"), ("s", "http://10.0.0.1:3000/verify")],
    )
    def test_parameters_present(self, session_id, callback_url):
        url = build_registration_url("https://hc.test", session_id, callback_url)
        assert f"session_id={session_id}" in url
        assert f"callback_url={callback_url}" in url
        assert re.search(r"&ts=\d+#/$", url)
        assert "human_id=" not in url

    def test_default_ts_is_now(self):
        before = now_ms()
        url = build_registration_url("https://hc.test", "s", "cb")
        after = now_ms()
        ts = int(re.search(r"ts=(\d+)", url).group(1))
        assert before <= ts <= after

    def test_values_not_escaped(self):
        url = build_registration_url("https://hc.test", "a b", "cb?x=1", ts=1)
        assert "session_id=a b&callback_url=cb?x=1&ts=1" in url


class TestBuildVerificationUrl:
    def test_exact_shape(self):
        url = build_verification_url(
            "https://hc.test", "sid-1", "h-1", "https://example.com/cb", ts=42
        )
        assert url == (
            "https://hc.test/authentication/index.html"
            "?session_id=sid-1&human_id=h-1&callback_url=https://example.com/cb"
            "&ts=42#/"
        )

    def test_human_id_between_session_and_callback(self):
        url = build_verification_url("https://hc.test", "sid", "hid", "https://cb.test")
        assert url.index("session_id=") < url.index("human_id=") < url.index(
            "callback_url="
        )
        assert re.search(r"&ts=\d+#/$", url)


# ---------------------------------------------------------------------------
# shared.generators / shared.datetime_utils
# ---------------------------------------------------------------------------


def test_generate_nonce_is_uuid4():
    nonce = generate_nonce()
    assert uuid.UUID(nonce).version == 4


def test_generate_nonce_unique():
    assert len({generate_nonce() for _ in range(100)}) == 100


def test_now_ms_close_to_wall_clock():
    assert abs(now_ms() - int(time.time() * 1000)) < 1000


# ---------------------------------------------------------------------------
# shared.logging — redaction
# ---------------------------------------------------------------------------


def test_redacts_credentials():
    event = {"event": "x", "app_key": "k", "sign": "abc", "client_secret": "s", "path": "/p"}
    out = redact_sensitive_fields(None, "info", event)
    assert out["app_key"] == "***REDACTED***"
    assert out["sign"] == "***REDACTED***"
    assert out["client_secret"] == "***REDACTED***"
    assert out["path"] == "/p"
    assert out["event"] == "x"


@pytest.mark.parametrize("log_format", ["console", "json"])
def test_configure_structlog_emits_no_deprecation_warning(log_format):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        configure_structlog(log_format)
    structlog.reset_defaults()
