# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from marketplace.domain.listings.entities import Listing, ListingFilter
from marketplace.domain.listings.repositories import ListingRepository


class ListPublicListingsUseCase:
    """Browse every listing, optionally narrowed by title search and category."""

    def __init__(self, *, listings: ListingRepository) -> None:
        self._listings = listings

    def execute(self, search: str | None = None, category: str | None = None) -> Sequence[Listing]:
        return self._listings.search(ListingFilter(search=search, category=category))


class ListOwnerListingsUseCase:
    def __init__(self, *, listings: ListingRepository) -> None:
        self._listings = listings

    def execute(self, owner_id: int) -> Sequence[Listing]:
        return self._listings.list_by_owner(owner_id)
