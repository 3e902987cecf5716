# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Listing entities and the rules a listing must satisfy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .exceptions import InvalidListingError

DEFAULT_LISTING_IMAGE = "https://placehold.co/400x300/E2E8F0/A0AEC0?text=No+Image"
ALL_CATEGORIES = "all"


class Category(str, Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    FURNITURE = "furniture"
    SPORTS = "sports"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> Category:
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(c.value for c in cls)
            raise InvalidListingError(f"Category must be one of: {allowed}.") from None


def fold_text(value: str) -> str:
    """Unicode case folding used for title search."""

    return value.casefold()


def _required_text(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidListingError(f"Field '{name}' is required.")
    return value.strip()


def _price(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidListingError("Price must be a number.")
    price = float(value)
    if not math.isfinite(price) or price < 0:
        raise InvalidListingError("Price must be a non-negative number.")
    return price


@dataclass(slots=True, frozen=True)
class ListingDraft:
    """Validated fields of a listing that has not been stored yet."""

    title: str
    description: str
    category: Category
    price: float
    image: str = DEFAULT_LISTING_IMAGE

    @classmethod
    def create(
        cls,
        *,
        title: object,
        description: object,
        category: object,
        price: object,
        image: object = None,
    ) -> ListingDraft:
        resolved_image = image.strip() if isinstance(image, str) else ""
        return cls(
            title=_required_text(title, "title"),
            description=_required_text(description, "description"),
            category=Category.parse(category),
            price=_price(price),
            image=resolved_image or DEFAULT_LISTING_IMAGE,
        )


@dataclass(slots=True, frozen=True)
class Listing:

    id: int
    title: str
    description: str
    category: Category
    price: float
    image: str
    owner_id: int
    created_at: datetime
    owner_username: str | None = None


@dataclass(slots=True, frozen=True)
class ListingFilter:
    """Public browse filter; absent criteria match everything."""

    search: str | None = None
    category: str | None = None

    @property
    def search_term(self) -> str | None:
        # Only an empty search is "no search"; whitespace is matched like any text.
        return self.search or None

    @property
    def category_term(self) -> str | None:
        if self.category is None:
            return None
        term = self.category.strip()
        if not term or term == ALL_CATEGORIES:
            return None
        return term

    def matches(self, listing: Listing) -> bool:
        term = self.search_term
        if term is not None and fold_text(term) not in fold_text(listing.title):
            return False
        category = self.category_term
        if category is not None and listing.category.value != category:
            return False
        return True
