"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from marketplace.application.services.password_hashing import WerkzeugPasswordHasher
from marketplace.application.services.tokens import JwtTokenService
from marketplace.application.use_cases.accounts.get_profile import GetProfileUseCase
from marketplace.application.use_cases.accounts.login_account import LoginAccountUseCase
from marketplace.application.use_cases.accounts.register_account import RegisterAccountUseCase
from marketplace.application.use_cases.listings.create_listing import CreateListingUseCase
from marketplace.application.use_cases.listings.delete_listing import DeleteListingUseCase
from marketplace.application.use_cases.listings.get_listing import GetListingUseCase
from marketplace.application.use_cases.listings.list_listings import (
    ListOwnerListingsUseCase,
    ListPublicListingsUseCase,
)
from marketplace.infrastructure.db import SessionLocal
from marketplace.infrastructure.health import StoreProbe
from marketplace.infrastructure.repositories.accounts.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from marketplace.infrastructure.repositories.listings.sqlalchemy_listing_repository import (
    SqlAlchemyListingRepository,
)
from marketplace.interfaces.http.controllers.auth_controller import AuthController
from marketplace.interfaces.http.controllers.health_controller import HealthController
from marketplace.interfaces.http.controllers.products_controller import ProductsController
from marketplace.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self._config.secret_key,
            algorithm=self._config.token.algorithm,
            ttl=timedelta(seconds=self._config.token.ttl_seconds),
        )

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(SessionLocal)

    @cached_property
    def listing_repository(self) -> SqlAlchemyListingRepository:
        return SqlAlchemyListingRepository(SessionLocal)

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(accounts=self.account_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
            profile_use_case=self.get_profile_use_case,
            tokens=self.token_service,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(
            create_use_case=CreateListingUseCase(listings=self.listing_repository),
            list_public_use_case=ListPublicListingsUseCase(listings=self.listing_repository),
            list_owner_use_case=ListOwnerListingsUseCase(listings=self.listing_repository),
            get_use_case=GetListingUseCase(listings=self.listing_repository),
            delete_use_case=DeleteListingUseCase(listings=self.listing_repository),
            tokens=self.token_service,
        )

    @cached_property
    def health_controller(self) -> HealthController:
        return HealthController(probe=StoreProbe(SessionLocal))
