# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import OwnedRecord


class OwnedResourceRepository(Protocol):
    """Every method takes the owning account id; there is no unscoped access."""

    def list_for_account(self, account_id: int) -> Sequence[OwnedRecord]: ...
    def get_for_account(self, account_id: int, record_id: int) -> OwnedRecord | None: ...
    def add(self, account_id: int, values: Mapping[str, Any]) -> OwnedRecord: ...
    def update(
        self, account_id: int, record_id: int, values: Mapping[str, Any]
    ) -> OwnedRecord | None: ...
    def delete(self, account_id: int, record_id: int) -> bool: ...
