# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from marketplace.domain.accounts.entities import Account
from marketplace.domain.accounts.exceptions import InvalidCredentialsError
from marketplace.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)
from marketplace.shared.logging import logger


class LoginAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> tuple[Account, str]:
        account = self._accounts.find_by_email((email or "").strip())
        password_valid = account is not None and self._password_hasher.verify(
            password or "", account.password_hash
        )

        if not password_valid:
            logger.warning("auth.login: rejected credentials")
            raise InvalidCredentialsError()

        # Earlier tokens for the account stay valid until they expire.
        token = self._tokens.issue(account.id)
        logger.info(f"auth.login: ok account_id={account.id}")
        return account, token
