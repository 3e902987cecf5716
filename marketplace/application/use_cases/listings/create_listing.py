# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from marketplace.domain.listings.entities import Listing, ListingDraft
from marketplace.domain.listings.repositories import ListingRepository
from marketplace.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CreateListingUseCase:
    def __init__(
        self,
        *,
        listings: ListingRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._listings = listings
        self._clock = clock

    def execute(self, owner_id: int, fields: Mapping[str, Any]) -> Listing:
        # Ownership comes from the caller's identity, never from the payload.
        draft = ListingDraft.create(
            title=fields.get("title"),
            description=fields.get("description"),
            category=fields.get("category"),
            price=fields.get("price"),
            image=fields.get("image"),
        )
        listing = self._listings.add(owner_id, draft, self._clock())
        logger.info(
            f"products.create: ok listing_id={listing.id} owner_id={owner_id} "
            f"category={listing.category.value}"
        )
        return listing
