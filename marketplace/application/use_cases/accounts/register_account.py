# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from marketplace.domain.accounts.entities import Account
from marketplace.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    MissingRegistrationFieldsError,
)
from marketplace.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)
from marketplace.shared.logging import logger


class RegisterAccountUseCase:
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

    def execute(self, username: str, email: str, password: str) -> tuple[Account, str]:
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email or not password:
            raise MissingRegistrationFieldsError()

        if self._accounts.exists(username=username, email=email):
            raise AccountAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        account = Account(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        persisted = self._accounts.add(account)
        token = self._tokens.issue(persisted.id)
        logger.info(f"auth.register: ok account_id={persisted.id}")
        return persisted, token
