# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from marketplace.shared.errors.base import AuthError, ConflictError, NotFoundError, ValidationError


class MissingRegistrationFieldsError(ValidationError):
    default_message = "Please fill out all fields."


class AccountAlreadyExistsError(ConflictError):
    # Same message whichever unique field collided.
    default_message = "Registration failed. User may already exist."
    default_code = "account_already_exists"


class InvalidCredentialsError(AuthError):
    # Identical for unknown email and wrong password.
    default_message = "Invalid email or password."
    default_code = "invalid_credentials"
    default_status = HTTPStatus.BAD_REQUEST


class MissingTokenError(AuthError):
    default_message = "Authentication failed. Token missing."


class InvalidTokenError(AuthError):
    default_message = "Authentication failed. Invalid token."


class AccountNotFoundError(NotFoundError):
    default_message = "User not found."
    default_code = "account_not_found"
