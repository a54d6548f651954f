# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from lifelog.domain.users.entities import Account, AuthResult
from lifelog.domain.users.repositories import (
    AccountRepository,
    PasswordHasher,
    SessionTokenCodec,
)
from lifelog.shared.errors.base import ValidationError
from lifelog.shared.logging import logger

FIELDS_REQUIRED = "All fields are required"


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        tokens: SessionTokenCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> AuthResult:
        if not (username and email and password):
            raise ValidationError(message=FIELDS_REQUIRED)

        hashed = self._password_hasher.hash(password)
        account = Account(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        # Uniqueness is enforced by the store, which raises DuplicateAccountError.
        persisted = self._accounts.add(account)
        token = self._tokens.issue(persisted.id)
        logger.info(f"auth.register: created account={persisted.id}")
        return AuthResult(account=persisted.public_view(), token=token)
