from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator

from marketplace.domain.listings.entities import Listing


class CreateListingRequestDTO(BaseModel):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = None
    image: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def _reject_bool_price(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("price must be a number")
        return value


class OwnerDTO(BaseModel):
    id: int
    username: str | None


class ListingDTO(BaseModel):
    id: int
    title: str
    description: str
    category: str
    price: float
    image: str
    owner: OwnerDTO
    created_at: datetime

    @classmethod
    def build(cls, listing: Listing) -> ListingDTO:
        return cls(
            id=listing.id,
            title=listing.title,
            description=listing.description,
            category=listing.category.value,
            price=listing.price,
            image=listing.image,
            owner=OwnerDTO(id=listing.owner_id, username=listing.owner_username),
            created_at=listing.created_at,
        )


class MessageDTO(BaseModel):
    message: str
