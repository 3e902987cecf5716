# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from marketplace.application.use_cases.accounts.get_profile import GetProfileUseCase
from marketplace.application.use_cases.accounts.login_account import LoginAccountUseCase
from marketplace.application.use_cases.accounts.register_account import RegisterAccountUseCase
from marketplace.domain.accounts.exceptions import (
    InvalidCredentialsError,
    MissingRegistrationFieldsError,
)
from marketplace.domain.accounts.repositories import TokenService
from marketplace.interfaces.http.auth import auth_required
from marketplace.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    ProfileDTO,
    RegisterRequestDTO,
)
from marketplace.shared.errors.validation import raise_validation_error
from marketplace.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterAccountUseCase,
        login_use_case: LoginAccountUseCase,
        profile_use_case: GetProfileUseCase,
        tokens: TokenService,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._profile_use_case = profile_use_case
        self._tokens = tokens

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, MissingRegistrationFieldsError)

        account, token = self._register_use_case.execute(
            dto.username or "", dto.email or "", dto.password or ""
        )
        payload = AuthSuccessDTO.build(account, token).model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            # Malformed credentials get the same answer as wrong ones.
            raise InvalidCredentialsError() from exc

        account, token = self._login_use_case.execute(dto.email or "", dto.password or "")
        payload = AuthSuccessDTO.build(account, token).model_dump()
        return jsonify(payload), HTTPStatus.OK

    @auth_required
    def profile(self, account_id: int) -> tuple[Response, int]:
        profile = self._profile_use_case.execute(account_id)
        return jsonify(ProfileDTO.build(profile).model_dump(mode="json")), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/profile", view_func=self.profile, methods=["GET"])
        return bp
