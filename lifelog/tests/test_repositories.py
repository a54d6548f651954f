from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from lifelog.domain.users.entities import Account
from lifelog.infrastructure.db.models import JournalEntry
from lifelog.infrastructure.repositories import (
    SqlAlchemyAccountRepository,
    SqlAlchemyOwnedResourceRepository,
)
from lifelog.shared.errors.base import StoreFailure


@pytest.fixture()
def broken_database() -> MagicMock:
    database = MagicMock()
    database.session_scope.side_effect = OperationalError(
        "SELECT 1", {}, Exception("disk I/O error")
    )
    return database


def test_account_store_errors_become_store_failure(broken_database: MagicMock) -> None:
    accounts = SqlAlchemyAccountRepository(broken_database)

    with pytest.raises(StoreFailure) as exc_info:
        accounts.find_by_login("alice")
    with pytest.raises(StoreFailure):
        accounts.add(Account(id=0, username="alice", email="a@example.com", password_hash="h"))

    assert exc_info.value.to_dict() == {"error": "Server error"}
    assert exc_info.value.status == 500


def test_owned_store_errors_become_store_failure(broken_database: MagicMock) -> None:
    records = SqlAlchemyOwnedResourceRepository(broken_database, JournalEntry)

    with pytest.raises(StoreFailure):
        records.list_for_account(1)
    with pytest.raises(StoreFailure):
        records.get_for_account(1, 1)
    with pytest.raises(StoreFailure):
        records.add(1, {"content": "x"})
    with pytest.raises(StoreFailure):
        records.update(1, 1, {"content": "x"})
    with pytest.raises(StoreFailure):
        records.delete(1, 1)
