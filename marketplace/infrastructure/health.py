# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.infrastructure.db.models import Account, Listing
from marketplace.infrastructure.unit_of_work import unit_of_work_scope
from marketplace.shared.logging import logger


@dataclass(slots=True, frozen=True)
class StoreHealth:
    ok: bool
    detail: str
    accounts: int | None = None
    listings: int | None = None


class StoreProbe:
    """Round-trips the marketplace tables to prove the store answers."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def check(self) -> StoreHealth:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                accounts = session.scalar(select(func.count()).select_from(Account))
                listings = session.scalar(select(func.count()).select_from(Listing))
        except SQLAlchemyError as exc:
            logger.error(f"health: store unavailable ({type(exc).__name__})")
            return StoreHealth(ok=False, detail=f"error: {type(exc).__name__}")
        return StoreHealth(ok=True, detail="ok", accounts=accounts or 0, listings=listings or 0)


__all__ = ["StoreHealth", "StoreProbe"]
