# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class OwnedRecord:
    """A persisted row scoped to exactly one account."""

    id: int
    account_id: int
    values: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.values}
