# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared error hierarchy for the service."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import cast


@dataclass(slots=True)
class AppError(Exception):
    """Base application exception carrying structured metadata."""

    message: str
    code: str
    status: HTTPStatus

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class DomainError(AppError):
    """Business rule failure; subclasses pin ``message``, ``code`` and ``status``."""

    def __init__(self, message: str | None = None) -> None:
        cls = type(self)
        resolved_message = message if message is not None else cast(
            str, getattr(cls, "default_message", "Request failed.")
        )
        super().__init__(
            message=resolved_message,
            code=cast(str, getattr(cls, "default_code", "domain_error")),
            status=cast(HTTPStatus, getattr(cls, "default_status", HTTPStatus.BAD_REQUEST)),
        )


class ValidationError(DomainError):
    default_message = "Invalid request."
    default_code = "validation_error"
    default_status = HTTPStatus.BAD_REQUEST


class AuthError(DomainError):
    default_message = "Authentication failed."
    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED


class ConflictError(DomainError):
    default_message = "Resource already exists."
    default_code = "conflict"
    default_status = HTTPStatus.BAD_REQUEST


class NotFoundError(DomainError):
    default_message = "Resource not found."
    default_code = "not_found"
    default_status = HTTPStatus.NOT_FOUND


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error.", code: str = "internal_error") -> None:
        super().__init__(message=message, code=code, status=HTTPStatus.INTERNAL_SERVER_ERROR)


class RateLimitedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            message="Too many requests. Please try again later.",
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
        )
