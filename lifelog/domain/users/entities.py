# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    username: str
    email: str
    password_hash: str = ""
    created_at: datetime | None = None

    def public_view(self) -> AccountView:
        return AccountView(id=self.id, username=self.username, email=self.email)

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, username={self.username!r})"


@dataclass(slots=True, frozen=True)
class AccountView:
    """What clients may see of an account. Never carries the credential."""

    id: int
    username: str
    email: str

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "username": self.username, "email": self.email}


@dataclass(slots=True, frozen=True)
class SessionToken:

    account_id: int
    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class AuthResult:

    account: AccountView
    token: SessionToken
