from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from marketplace.application.services.tokens import JwtTokenService
from marketplace.domain.accounts.exceptions import InvalidTokenError, MissingTokenError
from marketplace.shared.errors import AuthError

SECRET = "unit-test-secret-0123456789abcdef0123456789"


def test_issued_token_resolves_to_account_id() -> None:
    tokens = JwtTokenService(secret=SECRET)

    token = tokens.issue(42)

    assert tokens.validate(token) == 42


def test_token_carries_one_hour_expiry() -> None:
    now = datetime.now(UTC).replace(microsecond=0)
    tokens = JwtTokenService(secret=SECRET, clock=lambda: now)

    payload = jwt.decode(tokens.issue(1), SECRET, algorithms=["HS256"])

    assert payload["sub"] == "1"
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_is_rejected() -> None:
    issued_at = datetime.now(UTC) - timedelta(hours=2)
    tokens = JwtTokenService(secret=SECRET, clock=lambda: issued_at)

    with pytest.raises(InvalidTokenError) as excinfo:
        tokens.validate(tokens.issue(1))

    assert excinfo.value.status == 401
    assert excinfo.value.message == "Authentication failed. Invalid token."


def test_token_still_valid_just_inside_its_window() -> None:
    issued_at = datetime.now(UTC) - timedelta(minutes=59)
    tokens = JwtTokenService(secret=SECRET, clock=lambda: issued_at)

    assert tokens.validate(tokens.issue(5)) == 5


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_is_rejected(token: str | None) -> None:
    tokens = JwtTokenService(secret=SECRET)

    with pytest.raises(MissingTokenError) as excinfo:
        tokens.validate(token)

    assert isinstance(excinfo.value, AuthError)
    assert excinfo.value.message == "Authentication failed. Token missing."


def test_token_signed_with_other_secret_is_rejected() -> None:
    foreign = JwtTokenService(secret="another-secret-0123456789abcdef0123456789")
    tokens = JwtTokenService(secret=SECRET)

    with pytest.raises(InvalidTokenError):
        tokens.validate(foreign.issue(1))


def test_tampered_and_malformed_tokens_are_rejected() -> None:
    tokens = JwtTokenService(secret=SECRET)
    header, payload, signature = tokens.issue(1).split(".")
    forged = jwt.encode({"sub": "2", "exp": datetime.now(UTC) + timedelta(hours=1)}, "x" * 40)
    forged_payload = forged.split(".")[1]

    for candidate in ("not-a-token", f"{header}.{forged_payload}.{signature}", "a.b.c"):
        with pytest.raises(InvalidTokenError):
            tokens.validate(candidate)


def test_token_without_expiry_or_numeric_subject_is_rejected() -> None:
    tokens = JwtTokenService(secret=SECRET)
    no_exp = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
    bad_sub = jwt.encode(
        {"sub": "alice", "exp": datetime.now(UTC) + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        tokens.validate(no_exp)
    with pytest.raises(InvalidTokenError):
        tokens.validate(bad_sub)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="")
