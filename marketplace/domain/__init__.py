# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts.entities import Account, AccountSummary, Profile
from .listings.entities import Category, Listing, ListingDraft, ListingFilter

__all__ = [
    "Account",
    "AccountSummary",
    "Category",
    "Listing",
    "ListingDraft",
    "ListingFilter",
    "Profile",
]
