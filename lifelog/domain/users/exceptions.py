# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from lifelog.shared.errors.base import DomainError


class DuplicateAccountError(DomainError):
    code = "duplicate_account"
    message = "Username or email already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class Unauthenticated(DomainError):
    code = "unauthenticated"
    status = HTTPStatus.UNAUTHORIZED
    message = "Token is not valid"

    @classmethod
    def missing_token(cls) -> Unauthenticated:
        return cls(code="missing_token", message="No token, authorization denied")

    @classmethod
    def invalid_token(cls) -> Unauthenticated:
        return cls()
