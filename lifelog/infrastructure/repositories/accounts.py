# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lifelog.domain.users.entities import Account
from lifelog.domain.users.exceptions import DuplicateAccountError
from lifelog.domain.users.repositories import AccountRepository
from lifelog.infrastructure.db import Database
from lifelog.infrastructure.db.models import User
from lifelog.shared.errors.base import StoreFailure
from lifelog.shared.logging import logger


def _to_domain(row: User) -> Account:
    return Account(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_login(self, identifier: str) -> Account | None:
        try:
            with self._db.session_scope() as session:
                row = (
                    session.query(User)
                    .filter(or_(User.username == identifier, User.email == identifier))
                    .order_by(User.id.asc())
                    .first()
                )
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("accounts.find_by_login: store failure")
            raise StoreFailure() from exc

    def add(self, account: Account) -> Account:
        try:
            with self._db.session_scope() as session:
                row = User(
                    username=account.username,
                    email=account.email,
                    password_hash=account.password_hash,
                )
                if account.created_at is not None:
                    row.created_at = account.created_at
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # Which column collided is deliberately not surfaced.
            logger.info("accounts.add: uniqueness violation")
            raise DuplicateAccountError() from exc
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("accounts.add: store failure")
            raise StoreFailure() from exc
