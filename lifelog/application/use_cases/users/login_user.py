# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from lifelog.domain.users.entities import AuthResult
from lifelog.domain.users.exceptions import InvalidCredentialsError
from lifelog.domain.users.repositories import (
    AccountRepository,
    PasswordHasher,
    SessionTokenCodec,
)
from lifelog.shared.errors.base import ValidationError
from lifelog.shared.logging import logger

CREDENTIALS_REQUIRED = "Username and password are required"


class LoginUserUseCase:
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
        self._decoy_hash: str | None = None

    def execute(self, identifier: str, password: str) -> AuthResult:
        if not (identifier and password):
            raise ValidationError(message=CREDENTIALS_REQUIRED)

        account = self._accounts.find_by_login(identifier)
        if account is None:
            # Pay the hashing cost anyway so response time does not reveal unknown logins.
            self._password_hasher.verify(password, self._decoy())
            logger.info("auth.login: failed (unknown login)")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, account.password_hash):
            logger.info(f"auth.login: failed (bad password) account={account.id}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(account.id)
        logger.info(f"auth.login: ok account={account.id}")
        return AuthResult(account=account.public_view(), token=token)

    def _decoy(self) -> str:
        if self._decoy_hash is None:
            self._decoy_hash = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._decoy_hash
