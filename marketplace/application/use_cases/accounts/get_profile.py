"""Use-case for reading the caller's own account."""

from __future__ import annotations

from marketplace.domain.accounts.entities import Profile
from marketplace.domain.accounts.exceptions import AccountNotFoundError
from marketplace.domain.accounts.repositories import AccountRepository


class GetProfileUseCase:
    def __init__(self, *, accounts: AccountRepository) -> None:
        self._accounts = accounts

    def execute(self, account_id: int) -> Profile:
        account = self._accounts.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError()
        return Profile.from_account(account)
