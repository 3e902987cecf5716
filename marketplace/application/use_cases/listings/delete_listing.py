# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from marketplace.domain.listings.exceptions import ListingDeleteRejectedError
from marketplace.domain.listings.repositories import ListingRepository
from marketplace.shared.logging import logger


class DeleteListingUseCase:
    def __init__(self, *, listings: ListingRepository) -> None:
        self._listings = listings

    def execute(self, listing_id: int, requester_id: int) -> None:
        if not self._listings.delete_owned(listing_id, requester_id):
            logger.info(
                f"products.delete: rejected listing_id={listing_id} requester_id={requester_id}"
            )
            raise ListingDeleteRejectedError()
        logger.info(f"products.delete: ok listing_id={listing_id} owner_id={requester_id}")
