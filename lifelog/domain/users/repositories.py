# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Account, SessionToken


class AccountRepository(Protocol):
    def find_by_login(self, identifier: str) -> Account | None: ...
    def add(self, account: Account) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenCodec(Protocol):
    def issue(self, account_id: int, *, now: datetime | None = None) -> SessionToken: ...
    def resolve(self, token: str) -> int: ...
