# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from lifelog.domain.resources.entities import OwnedRecord
from lifelog.domain.resources.repositories import OwnedResourceRepository
from lifelog.shared.errors.base import NotFoundError
from lifelog.shared.logging import logger


class ManageOwnedResourceUseCase:
    """CRUD over one resource kind, always scoped to the calling account.

    A record that exists but belongs to someone else is reported exactly like a
    missing one.
    """

    def __init__(self, *, kind: str, records: OwnedResourceRepository) -> None:
        self._kind = kind
        self._records = records

    def list(self, account_id: int) -> Sequence[OwnedRecord]:
        return self._records.list_for_account(account_id)

    def get(self, account_id: int, record_id: int) -> OwnedRecord:
        record = self._records.get_for_account(account_id, record_id)
        if record is None:
            raise NotFoundError()
        return record

    def create(self, account_id: int, values: Mapping[str, Any]) -> OwnedRecord:
        record = self._records.add(account_id, values)
        logger.info(f"{self._kind}.create: account={account_id} id={record.id}")
        return record

    def update(self, account_id: int, record_id: int, values: Mapping[str, Any]) -> OwnedRecord:
        record = self._records.update(account_id, record_id, values)
        if record is None:
            logger.info(f"{self._kind}.update: miss account={account_id} id={record_id}")
            raise NotFoundError()
        return record

    def delete(self, account_id: int, record_id: int) -> None:
        if not self._records.delete(account_id, record_id):
            logger.info(f"{self._kind}.delete: miss account={account_id} id={record_id}")
            raise NotFoundError()
        logger.info(f"{self._kind}.delete: account={account_id} id={record_id}")
