# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from marketplace.domain.accounts.entities import Account as DomainAccount
from marketplace.domain.accounts.exceptions import AccountAlreadyExistsError
from marketplace.domain.accounts.repositories import AccountRepository
from marketplace.infrastructure.db.models import Account
from marketplace.infrastructure.unit_of_work import unit_of_work_scope


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _to_domain(row: Account) -> DomainAccount:
    return DomainAccount(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        image=row.image,
        created_at=_aware(row.created_at),
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainAccount | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Account).filter(Account.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, account_id: int) -> DomainAccount | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Account, account_id)
            return _to_domain(row) if row else None

    def exists(self, *, username: str, email: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Account.id)
                .filter(or_(Account.username == username, Account.email == email))
                .first()
            )
            return row is not None

    def add(self, account: DomainAccount) -> DomainAccount:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Account(
                    username=account.username,
                    email=account.email,
                    password_hash=account.password_hash,
                    image=account.image,
                    created_at=account.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same username/email.
            raise AccountAlreadyExistsError() from exc
