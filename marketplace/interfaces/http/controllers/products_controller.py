# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from marketplace.application.use_cases.listings.create_listing import CreateListingUseCase
from marketplace.application.use_cases.listings.delete_listing import DeleteListingUseCase
from marketplace.application.use_cases.listings.get_listing import GetListingUseCase
from marketplace.application.use_cases.listings.list_listings import (
    ListOwnerListingsUseCase,
    ListPublicListingsUseCase,
)
from marketplace.domain.accounts.repositories import TokenService
from marketplace.domain.listings.entities import Listing
from marketplace.domain.listings.exceptions import (
    InvalidListingError,
    ListingDeleteRejectedError,
    ListingNotFoundError,
)
from marketplace.interfaces.http.auth import auth_required
from marketplace.interfaces.http.dto.products import (
    CreateListingRequestDTO,
    ListingDTO,
    MessageDTO,
)
from marketplace.shared.errors.validation import raise_validation_error

# Largest id the store can address; anything above cannot exist.
_MAX_ID = 2**63 - 1


def _listings_payload(listings: Sequence[Listing]) -> list[dict]:
    return [ListingDTO.build(listing).model_dump(mode="json") for listing in listings]


class ProductsController:
    def __init__(
        self,
        *,
        create_use_case: CreateListingUseCase,
        list_public_use_case: ListPublicListingsUseCase,
        list_owner_use_case: ListOwnerListingsUseCase,
        get_use_case: GetListingUseCase,
        delete_use_case: DeleteListingUseCase,
        tokens: TokenService,
    ) -> None:
        self._create_use_case = create_use_case
        self._list_public_use_case = list_public_use_case
        self._list_owner_use_case = list_owner_use_case
        self._get_use_case = get_use_case
        self._delete_use_case = delete_use_case
        self._tokens = tokens

    def list_public(self) -> tuple[Response, int]:
        listings = self._list_public_use_case.execute(
            search=request.args.get("search"),
            category=request.args.get("category"),
        )
        return jsonify(_listings_payload(listings)), HTTPStatus.OK

    @auth_required
    def my_listings(self, account_id: int) -> tuple[Response, int]:
        listings = self._list_owner_use_case.execute(account_id)
        return jsonify(_listings_payload(listings)), HTTPStatus.OK

    @auth_required
    def create(self, account_id: int) -> tuple[Response, int]:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise InvalidListingError()
        try:
            dto = CreateListingRequestDTO.model_validate(body)
        except ValidationError as exc:
            raise_validation_error(exc, InvalidListingError)

        listing = self._create_use_case.execute(account_id, dto.model_dump())
        return jsonify(ListingDTO.build(listing).model_dump(mode="json")), HTTPStatus.CREATED

    def get(self, listing_id: int) -> tuple[Response, int]:
        if listing_id > _MAX_ID:
            raise ListingNotFoundError()
        listing = self._get_use_case.execute(listing_id)
        return jsonify(ListingDTO.build(listing).model_dump(mode="json")), HTTPStatus.OK

    @auth_required
    def delete(self, account_id: int, listing_id: int) -> tuple[Response, int]:
        if listing_id > _MAX_ID:
            raise ListingDeleteRejectedError()
        self._delete_use_case.execute(listing_id, account_id)
        payload = MessageDTO(message="Product deleted successfully.").model_dump()
        return jsonify(payload), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/api/products")
        bp.add_url_rule("", view_func=self.list_public, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"], endpoint="create")
        bp.add_url_rule("/my-listings", view_func=self.my_listings, methods=["GET"])
        bp.add_url_rule("/<int:listing_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule(
            "/<int:listing_id>", view_func=self.delete, methods=["DELETE"], endpoint="delete"
        )
        return bp
