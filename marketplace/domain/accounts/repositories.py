# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account


class AccountRepository(Protocol):
    def find_by_email(self, email: str) -> Account | None: ...
    def find_by_id(self, account_id: int) -> Account | None: ...
    def exists(self, *, username: str, email: str) -> bool: ...
    def add(self, account: Account) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, account_id: int) -> str: ...
    def validate(self, token: str | None) -> int: ...
