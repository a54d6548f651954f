from __future__ import annotations

import base64
import json
from datetime import UTC, datetime, timedelta

import jwt
import pytest

from lifelog.application.services.session_tokens import JwtSessionTokenCodec
from lifelog.domain.users.exceptions import Unauthenticated
from lifelog.tests.conftest import SECRET


def _b64(obj: dict) -> str:
    raw = json.dumps(obj, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def test_issue_then_resolve_returns_account_id(token_codec: JwtSessionTokenCodec) -> None:
    issued = token_codec.issue(42)

    assert issued.account_id == 42
    assert token_codec.resolve(issued.token) == 42


def test_default_validity_window_is_24_hours(token_codec: JwtSessionTokenCodec) -> None:
    now = datetime.now(UTC)
    issued = token_codec.issue(7, now=now)

    assert issued.expires_at - now == timedelta(hours=24)
    claims = jwt.decode(issued.token, SECRET, algorithms=["HS256"])
    assert claims["sub"] == "7"
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_expired_token_is_rejected(token_codec: JwtSessionTokenCodec) -> None:
    issued = token_codec.issue(7, now=datetime.now(UTC) - timedelta(hours=25))

    with pytest.raises(Unauthenticated) as exc_info:
        token_codec.resolve(issued.token)

    assert exc_info.value.to_dict() == {"error": "Token is not valid"}


def test_tampered_signature_is_rejected(token_codec: JwtSessionTokenCodec) -> None:
    token = token_codec.issue(7).token
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

    with pytest.raises(Unauthenticated):
        token_codec.resolve(f"{header}.{payload}.{flipped}")


def test_token_signed_with_other_secret_is_rejected(token_codec: JwtSessionTokenCodec) -> None:
    foreign = JwtSessionTokenCodec("another-deployment-secret-9876543210").issue(7)

    with pytest.raises(Unauthenticated):
        token_codec.resolve(foreign.token)


def test_unsigned_token_is_rejected(token_codec: JwtSessionTokenCodec) -> None:
    now = int(datetime.now(UTC).timestamp())
    header = _b64({"alg": "none", "typ": "JWT"})
    payload = _b64({"sub": "7", "iat": now, "exp": now + 3600})
    unsigned = f"{header}.{payload}."

    with pytest.raises(Unauthenticated):
        token_codec.resolve(unsigned)


def test_token_without_expiry_is_rejected(token_codec: JwtSessionTokenCodec) -> None:
    token = jwt.encode({"sub": "7", "iat": datetime.now(UTC)}, SECRET, algorithm="HS256")

    with pytest.raises(Unauthenticated):
        token_codec.resolve(token)


def test_non_numeric_subject_is_rejected(token_codec: JwtSessionTokenCodec) -> None:
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "alice", "iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256"
    )

    with pytest.raises(Unauthenticated):
        token_codec.resolve(token)


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c"])
def test_garbage_is_rejected(token_codec: JwtSessionTokenCodec, garbage: str) -> None:
    with pytest.raises(Unauthenticated):
        token_codec.resolve(garbage)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtSessionTokenCodec("")
