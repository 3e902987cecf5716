from __future__ import annotations

from dataclasses import replace

import pytest

from marketplace.application.services.password_hashing import WerkzeugPasswordHasher
from marketplace.application.services.tokens import JwtTokenService
from marketplace.application.use_cases.accounts.get_profile import GetProfileUseCase
from marketplace.application.use_cases.accounts.login_account import LoginAccountUseCase
from marketplace.application.use_cases.accounts.register_account import RegisterAccountUseCase
from marketplace.domain.accounts.entities import Account
from marketplace.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidCredentialsError,
    MissingRegistrationFieldsError,
)
from marketplace.domain.accounts.repositories import AccountRepository, PasswordHasher
from marketplace.shared.errors import AuthError, ConflictError, NotFoundError, ValidationError


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> Account | None:
        return next((a for a in self._accounts.values() if a.email == email), None)

    def find_by_id(self, account_id: int) -> Account | None:
        return self._accounts.get(account_id)

    def exists(self, *, username: str, email: str) -> bool:
        return any(a.username == username or a.email == email for a in self._accounts.values())

    def add(self, account: Account) -> Account:
        new_account = replace(account, id=self._seq)
        self._seq += 1
        self._accounts[new_account.id] = new_account
        return new_account


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def accounts() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret="use-case-secret-0123456789abcdef0123456789")


@pytest.fixture()
def register(accounts: InMemoryAccountRepository, tokens: JwtTokenService) -> RegisterAccountUseCase:
    return RegisterAccountUseCase(
        accounts=accounts, tokens=tokens, password_hasher=DeterministicHasher()
    )


@pytest.fixture()
def login(accounts: InMemoryAccountRepository, tokens: JwtTokenService) -> LoginAccountUseCase:
    return LoginAccountUseCase(
        accounts=accounts, tokens=tokens, password_hasher=DeterministicHasher()
    )


def test_register_account_success(
    register: RegisterAccountUseCase,
    accounts: InMemoryAccountRepository,
    tokens: JwtTokenService,
) -> None:
    account, token = register.execute("alice", "a@x.com", "pw123")

    assert account.id == 1
    assert account.summary().username == "alice"
    assert account.password_hash == "hashed:pw123"
    assert accounts.find_by_email("a@x.com") is not None
    assert tokens.validate(token) == account.id


@pytest.mark.parametrize(
    ("username", "email"),
    [("alice", "other@x.com"), ("bob", "a@x.com"), ("alice", "a@x.com")],
)
def test_register_duplicate_username_or_email_conflicts(
    register: RegisterAccountUseCase,
    accounts: InMemoryAccountRepository,
    username: str,
    email: str,
) -> None:
    register.execute("alice", "a@x.com", "pw123")

    with pytest.raises(AccountAlreadyExistsError) as excinfo:
        register.execute(username, email, "secret")

    assert isinstance(excinfo.value, ConflictError)
    assert excinfo.value.message == "Registration failed. User may already exist."
    assert len(accounts._accounts) == 1


@pytest.mark.parametrize(
    ("username", "email", "password"),
    [("", "a@x.com", "pw"), ("alice", "", "pw"), ("alice", "a@x.com", ""), ("  ", "a@x.com", "pw")],
)
def test_register_requires_every_field(
    register: RegisterAccountUseCase,
    accounts: InMemoryAccountRepository,
    username: str,
    email: str,
    password: str,
) -> None:
    with pytest.raises(MissingRegistrationFieldsError) as excinfo:
        register.execute(username, email, password)

    assert isinstance(excinfo.value, ValidationError)
    assert excinfo.value.status == 400
    assert accounts._accounts == {}


def test_login_success_returns_fresh_token(
    register: RegisterAccountUseCase,
    login: LoginAccountUseCase,
    tokens: JwtTokenService,
) -> None:
    registered, _ = register.execute("alice", "a@x.com", "pw123")

    account, token = login.execute("a@x.com", "pw123")

    assert account.id == registered.id
    assert tokens.validate(token) == registered.id


def test_login_does_not_invalidate_earlier_tokens(
    register: RegisterAccountUseCase,
    login: LoginAccountUseCase,
    tokens: JwtTokenService,
) -> None:
    _, first = register.execute("alice", "a@x.com", "pw123")
    _, second = login.execute("a@x.com", "pw123")

    assert tokens.validate(first) == tokens.validate(second)


def test_login_wrong_password_and_unknown_email_look_identical(
    register: RegisterAccountUseCase,
    login: LoginAccountUseCase,
) -> None:
    register.execute("alice", "a@x.com", "pw123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("a@x.com", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("nobody@x.com", "pw123")

    assert isinstance(wrong_password.value, AuthError)
    assert wrong_password.value.message == unknown_email.value.message == "Invalid email or password."
    assert wrong_password.value.status == unknown_email.value.status == 400


def test_get_profile(register: RegisterAccountUseCase, accounts: InMemoryAccountRepository) -> None:
    account, _ = register.execute("alice", "a@x.com", "pw123")

    profile = GetProfileUseCase(accounts=accounts).execute(account.id)

    assert (profile.id, profile.username, profile.email) == (account.id, "alice", "a@x.com")


def test_get_profile_unknown_account(accounts: InMemoryAccountRepository) -> None:
    with pytest.raises(AccountNotFoundError) as excinfo:
        GetProfileUseCase(accounts=accounts).execute(99)

    assert isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.status == 404


def test_werkzeug_hasher_salts_every_hash() -> None:
    hasher = WerkzeugPasswordHasher()

    first = hasher.hash("pw123")
    second = hasher.hash("pw123")

    assert first != second
    assert "pw123" not in first
    assert hasher.verify("pw123", first)
    assert hasher.verify("pw123", second)
    assert not hasher.verify("wrong", first)
