from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

import pytest

from marketplace.application.use_cases.listings.create_listing import CreateListingUseCase
from marketplace.application.use_cases.listings.delete_listing import DeleteListingUseCase
from marketplace.application.use_cases.listings.get_listing import GetListingUseCase
from marketplace.application.use_cases.listings.list_listings import (
    ListOwnerListingsUseCase,
    ListPublicListingsUseCase,
)
from marketplace.domain.accounts.exceptions import AccountNotFoundError
from marketplace.domain.listings.entities import Category, Listing, ListingDraft, ListingFilter
from marketplace.domain.listings.exceptions import (
    InvalidListingError,
    ListingDeleteRejectedError,
    ListingNotFoundError,
)
from marketplace.domain.listings.repositories import ListingRepository
from marketplace.shared.errors import NotFoundError

U1, U2 = 1, 2
FIXED_NOW = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)


class InMemoryListingRepository(ListingRepository):
    def __init__(self, owners: dict[int, str]) -> None:
        self._owners = owners
        self._rows: dict[int, Listing] = {}
        self._seq = 1

    def add(self, owner_id: int, draft: ListingDraft, created_at: datetime) -> Listing:
        if owner_id not in self._owners:
            raise AccountNotFoundError()
        listing = Listing(
            id=self._seq,
            title=draft.title,
            description=draft.description,
            category=draft.category,
            price=draft.price,
            image=draft.image,
            owner_id=owner_id,
            created_at=created_at,
            owner_username=self._owners.get(owner_id),
        )
        self._seq += 1
        self._rows[listing.id] = listing
        return listing

    def get(self, listing_id: int) -> Listing | None:
        return self._rows.get(listing_id)

    def search(self, criteria: ListingFilter) -> Sequence[Listing]:
        return [row for row in self._rows.values() if criteria.matches(row)]

    def list_by_owner(self, owner_id: int) -> Sequence[Listing]:
        return [row for row in self._rows.values() if row.owner_id == owner_id]

    def delete_owned(self, listing_id: int, owner_id: int) -> bool:
        row = self._rows.get(listing_id)
        if row is None or row.owner_id != owner_id:
            return False
        del self._rows[listing_id]
        return True


@pytest.fixture()
def listings() -> InMemoryListingRepository:
    return InMemoryListingRepository({U1: "alice", U2: "bob"})


@pytest.fixture()
def create(listings: InMemoryListingRepository) -> CreateListingUseCase:
    return CreateListingUseCase(listings=listings, clock=lambda: FIXED_NOW)


def _fields(title: str, category: str = "other", price: float = 10) -> dict:
    return {"title": title, "description": f"{title} for sale", "category": category, "price": price}


def test_create_listing_stamps_owner_and_timestamp(create: CreateListingUseCase) -> None:
    listing = create.execute(U1, {**_fields("Lamp", "furniture", 20), "owner": U2, "owner_id": U2})

    assert listing.owner_id == U1
    assert listing.owner_username == "alice"
    assert listing.created_at == FIXED_NOW
    assert listing.category is Category.FURNITURE
    assert listing.image.startswith("https://placehold.co/")


def test_create_listing_rejects_invalid_fields(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    with pytest.raises(InvalidListingError):
        create.execute(U1, {"title": "Lamp", "category": "furniture", "price": 20})
    with pytest.raises(InvalidListingError):
        create.execute(U1, _fields("Lamp", "furniture", -5))

    assert listings.search(ListingFilter()) == []


def test_list_by_owner_scenario(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    lamp = create.execute(U1, _fields("Lamp", "furniture", 20))
    by_owner = ListOwnerListingsUseCase(listings=listings)

    assert by_owner.execute(U1) == [lamp]
    assert by_owner.execute(U2) == []


def test_list_public_search_is_case_insensitive_substring(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    jacket = create.execute(U1, _fields("Leather Jacket", "clothing"))
    jack = create.execute(U2, _fields("JACK plug", "electronics"))
    create.execute(U1, _fields("Bookshelf", "furniture"))

    result = ListPublicListingsUseCase(listings=listings).execute(search="jack")

    assert result == [jacket, jack]
    assert all("jack" in item.title.lower() for item in result)


def test_list_public_category_all_equals_no_filter(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    create.execute(U1, _fields("Lamp", "furniture"))
    create.execute(U2, _fields("Novel", "books"))
    browse = ListPublicListingsUseCase(listings=listings)

    assert browse.execute(category="all") == browse.execute()
    assert [item.title for item in browse.execute(category="books")] == ["Novel"]
    assert browse.execute(search="novel", category="furniture") == []
    assert browse.execute(category="boats") == []


def test_get_listing(create: CreateListingUseCase, listings: InMemoryListingRepository) -> None:
    lamp = create.execute(U1, _fields("Lamp"))
    get = GetListingUseCase(listings=listings)

    assert get.execute(lamp.id) == lamp
    with pytest.raises(ListingNotFoundError) as excinfo:
        get.execute(999)
    assert excinfo.value.message == "Product not found."


def test_delete_by_non_owner_is_not_found_and_keeps_listing(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    lamp = create.execute(U2, _fields("Lamp"))
    delete = DeleteListingUseCase(listings=listings)

    with pytest.raises(ListingDeleteRejectedError) as foreign:
        delete.execute(lamp.id, U1)
    with pytest.raises(ListingDeleteRejectedError) as missing:
        delete.execute(999, U1)

    assert isinstance(foreign.value, NotFoundError)
    assert foreign.value.message == missing.value.message
    assert foreign.value.status == missing.value.status == 404
    assert listings.get(lamp.id) == lamp


def test_delete_by_owner_removes_listing(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    lamp = create.execute(U1, _fields("Lamp"))

    DeleteListingUseCase(listings=listings).execute(lamp.id, U1)

    assert listings.get(lamp.id) is None
    with pytest.raises(ListingDeleteRejectedError):
        DeleteListingUseCase(listings=listings).execute(lamp.id, U1)


def test_create_listing_for_vanished_owner_is_not_found(
    create: CreateListingUseCase, listings: InMemoryListingRepository
) -> None:
    with pytest.raises(AccountNotFoundError) as excinfo:
        create.execute(999, _fields("Lamp"))

    assert excinfo.value.status == 404
    assert listings.search(ListingFilter()) == []
