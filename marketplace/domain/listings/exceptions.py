# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from marketplace.shared.errors.base import NotFoundError, ValidationError


class InvalidListingError(ValidationError):
    default_message = "Failed to create product listing."
    default_code = "invalid_listing"


class ListingNotFoundError(NotFoundError):
    default_message = "Product not found."
    default_code = "listing_not_found"


class ListingDeleteRejectedError(NotFoundError):
    # Absence and foreign ownership are reported the same way.
    default_message = "Product not found or not authorized to delete."
    default_code = "listing_not_found"
