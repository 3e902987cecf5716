from __future__ import annotations

from marketplace.domain.listings.entities import Listing
from marketplace.domain.listings.exceptions import ListingNotFoundError
from marketplace.domain.listings.repositories import ListingRepository


class GetListingUseCase:
    def __init__(self, *, listings: ListingRepository) -> None:
        self._listings = listings

    def execute(self, listing_id: int) -> Listing:
        listing = self._listings.get(listing_id)
        if listing is None:
            raise ListingNotFoundError()
        return listing
