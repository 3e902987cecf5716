# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_ACCOUNT_IMAGE = "https://placehold.co/150x150/E2E8F0/A0AEC0?text=User"


@dataclass(slots=True, frozen=True)
class AccountSummary:
    """Public view of an account returned alongside a fresh token."""

    username: str
    email: str


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime
    image: str = DEFAULT_ACCOUNT_IMAGE

    def summary(self) -> AccountSummary:
        return AccountSummary(username=self.username, email=self.email)


@dataclass(slots=True, frozen=True)
class Profile:
    """Account as shown to its owner; never carries the password hash."""

    id: int
    username: str
    email: str
    image: str
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> Profile:
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            image=account.image,
            created_at=account.created_at,
        )
