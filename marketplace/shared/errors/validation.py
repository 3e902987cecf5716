# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bridge from pydantic request parsing to the application error hierarchy."""

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from marketplace.shared.logging import logger

from .base import ValidationError


def rejected_fields(exc: PydanticValidationError) -> list[str]:
    """Dotted paths of the offending fields, e.g. ``["price", "owner.id"]``."""

    fields = {
        ".".join(str(part) for part in error.get("loc", ()) if part is not None)
        for error in exc.errors()
    }
    return sorted(field for field in fields if field)


def raise_validation_error(
    exc: PydanticValidationError,
    error_type: type[ValidationError] = ValidationError,
) -> NoReturn:
    # Field names only; rejected values may be credentials.
    logger.debug(f"validation: rejected payload fields={rejected_fields(exc)}")
    raise error_type() from exc


__all__ = ["raise_validation_error", "rejected_fields"]
