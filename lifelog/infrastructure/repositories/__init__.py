# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts import SqlAlchemyAccountRepository
from .owned import SqlAlchemyOwnedResourceRepository

__all__ = ["SqlAlchemyAccountRepository", "SqlAlchemyOwnedResourceRepository"]
