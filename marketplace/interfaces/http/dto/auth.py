from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from marketplace.domain.accounts.entities import Account, Profile


class RegisterRequestDTO(BaseModel):
    # Presence and emptiness are checked by the use case.
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequestDTO(BaseModel):
    email: str | None = None
    password: str | None = None


class AccountSummaryDTO(BaseModel):
    username: str
    email: str


class AuthSuccessDTO(BaseModel):
    user: AccountSummaryDTO
    token: str

    @classmethod
    def build(cls, account: Account, token: str) -> AuthSuccessDTO:
        summary = account.summary()
        return cls(user=AccountSummaryDTO(username=summary.username, email=summary.email), token=token)


class ProfileDTO(BaseModel):
    id: int
    username: str
    email: str
    image: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def build(cls, profile: Profile) -> ProfileDTO:
        return cls.model_validate(profile)
