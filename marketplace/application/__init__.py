# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.accounts.get_profile import GetProfileUseCase
from .use_cases.accounts.login_account import LoginAccountUseCase
from .use_cases.accounts.register_account import RegisterAccountUseCase
from .use_cases.listings.create_listing import CreateListingUseCase
from .use_cases.listings.delete_listing import DeleteListingUseCase
from .use_cases.listings.get_listing import GetListingUseCase
from .use_cases.listings.list_listings import ListOwnerListingsUseCase, ListPublicListingsUseCase

__all__ = [
    "CreateListingUseCase",
    "DeleteListingUseCase",
    "GetListingUseCase",
    "GetProfileUseCase",
    "ListOwnerListingsUseCase",
    "ListPublicListingsUseCase",
    "LoginAccountUseCase",
    "RegisterAccountUseCase",
]
