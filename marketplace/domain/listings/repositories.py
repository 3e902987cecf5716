# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import Listing, ListingDraft, ListingFilter


class ListingRepository(Protocol):
    def add(self, owner_id: int, draft: ListingDraft, created_at: datetime) -> Listing: ...
    def get(self, listing_id: int) -> Listing | None: ...
    def search(self, criteria: ListingFilter) -> Sequence[Listing]: ...
    def list_by_owner(self, owner_id: int) -> Sequence[Listing]: ...
    def delete_owned(self, listing_id: int, owner_id: int) -> bool: ...
