# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from marketplace.domain.accounts.exceptions import AccountNotFoundError
from marketplace.domain.listings.entities import (
    Category,
    ListingDraft,
    ListingFilter,
    fold_text,
)
from marketplace.domain.listings.entities import Listing as DomainListing
from marketplace.domain.listings.repositories import ListingRepository
from marketplace.infrastructure.db.models import Account, Listing
from marketplace.infrastructure.unit_of_work import unit_of_work_scope

_LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches as a plain substring."""

    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )


def _to_domain(row: Listing, owner_username: str | None) -> DomainListing:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainListing(
        id=row.id,
        title=row.title,
        description=row.description,
        category=Category(row.category),
        price=float(row.price),
        image=row.image,
        owner_id=row.owner_id,
        created_at=created_at,
        owner_username=owner_username,
    )


class SqlAlchemyListingRepository(ListingRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    @staticmethod
    def _with_owner(session: Session) -> Query:
        # Owner name is looked up per read, never stored on the listing.
        return session.query(Listing, Account.username).outerjoin(
            Account, Listing.owner_id == Account.id
        )

    def add(self, owner_id: int, draft: ListingDraft, created_at: datetime) -> DomainListing:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                owner = session.get(Account, owner_id)
                if owner is None:
                    # Token still valid, account gone.
                    raise AccountNotFoundError()
                row = Listing(
                    title=draft.title,
                    title_key=fold_text(draft.title),
                    description=draft.description,
                    category=draft.category.value,
                    price=draft.price,
                    image=draft.image,
                    owner_id=owner_id,
                    created_at=created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row, owner.username)
        except IntegrityError as exc:
            # Owner deleted between the lookup and the insert.
            raise AccountNotFoundError() from exc

    def get(self, listing_id: int) -> DomainListing | None:
        with unit_of_work_scope(self._session_factory) as session:
            result = self._with_owner(session).filter(Listing.id == listing_id).first()
            if result is None:
                return None
            row, username = result
            return _to_domain(row, username)

    def search(self, criteria: ListingFilter) -> Sequence[DomainListing]:
        with unit_of_work_scope(self._session_factory) as session:
            query = self._with_owner(session)
            term = criteria.search_term
            if term is not None:
                query = query.filter(
                    Listing.title_key.like(
                        f"%{escape_like(fold_text(term))}%", escape=_LIKE_ESCAPE
                    )
                )
            category = criteria.category_term
            if category is not None:
                query = query.filter(Listing.category == category)
            rows = query.order_by(Listing.id.asc()).all()
            return [_to_domain(row, username) for row, username in rows]

    def list_by_owner(self, owner_id: int) -> Sequence[DomainListing]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                self._with_owner(session)
                .filter(Listing.owner_id == owner_id)
                .order_by(Listing.id.asc())
                .all()
            )
            return [_to_domain(row, username) for row, username in rows]

    def delete_owned(self, listing_id: int, owner_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            deleted = (
                session.query(Listing)
                .filter(Listing.id == listing_id, Listing.owner_id == owner_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0
