# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer token issuing and validation.

Tokens are HS256 JWTs carrying the account id in ``sub`` and an ``exp``
claim. Nothing is stored server side: a token is valid until it expires,
and any number of tokens may be valid for the same account at once.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from marketplace.domain.accounts.exceptions import InvalidTokenError, MissingTokenError
from marketplace.domain.accounts.repositories import TokenService
from marketplace.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, account_id: int) -> str:
        issued_at = self._clock()
        payload = {
            "sub": str(account_id),
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str | None) -> int:
        if not token:
            raise MissingTokenError()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.debug("tokens.validate: expired token")
            raise InvalidTokenError() from exc
        except jwt.PyJWTError as exc:
            logger.debug(f"tokens.validate: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc
