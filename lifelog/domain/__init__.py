# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .resources import OwnedRecord, OwnedResourceRepository
from .users import (
    Account,
    AccountView,
    AuthResult,
    DuplicateAccountError,
    InvalidCredentialsError,
    SessionToken,
    Unauthenticated,
)

__all__ = [
    "Account",
    "AccountView",
    "AuthResult",
    "DuplicateAccountError",
    "InvalidCredentialsError",
    "OwnedRecord",
    "OwnedResourceRepository",
    "SessionToken",
    "Unauthenticated",
]
