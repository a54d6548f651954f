# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lifelog.domain.resources.entities import OwnedRecord
from lifelog.domain.resources.repositories import OwnedResourceRepository
from lifelog.infrastructure.db import Database
from lifelog.infrastructure.db.models import OwnedMixin
from lifelog.shared.errors.base import ConflictError, StoreFailure
from lifelog.shared.logging import logger


def _to_domain(row: OwnedMixin) -> OwnedRecord:
    return OwnedRecord(id=row.id, account_id=row.user_id, values=row.values())


class SqlAlchemyOwnedResourceRepository(OwnedResourceRepository):
    def __init__(self, database: Database, model: type[OwnedMixin]) -> None:
        self._db = database
        self._model = model

    def _owned(self, session: Session, account_id: int, record_id: int) -> OwnedMixin | None:
        model = self._model
        return (
            session.query(model)
            .filter(model.id == record_id, model.user_id == account_id)
            .first()
        )

    def _clean(self, values: Mapping[str, Any]) -> dict[str, Any]:
        columns = self._model.__table__.c  # type: ignore[attr-defined]
        # None on a NOT NULL column falls back to the column default
        return {
            k: v
            for k, v in values.items()
            if k in self._model.writable and (v is not None or columns[k].nullable)
        }

    def list_for_account(self, account_id: int) -> Sequence[OwnedRecord]:
        model = self._model
        try:
            with self._db.session_scope() as session:
                rows = (
                    session.query(model)
                    .filter(model.user_id == account_id)
                    .order_by(model.created_at.desc(), model.id.desc())
                    .all()
                )
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"{model.__tablename__}.list: store failure")
            raise StoreFailure() from exc

    def get_for_account(self, account_id: int, record_id: int) -> OwnedRecord | None:
        try:
            with self._db.session_scope() as session:
                row = self._owned(session, account_id, record_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"{self._model.__tablename__}.get: store failure")
            raise StoreFailure() from exc

    def add(self, account_id: int, values: Mapping[str, Any]) -> OwnedRecord:
        try:
            with self._db.session_scope() as session:
                row = self._model(user_id=account_id, **self._clean(values))
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"{self._model.__tablename__}.add: constraint violation")
            raise ConflictError() from exc
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"{self._model.__tablename__}.add: store failure")
            raise StoreFailure() from exc

    def update(
        self, account_id: int, record_id: int, values: Mapping[str, Any]
    ) -> OwnedRecord | None:
        try:
            with self._db.session_scope() as session:
                row = self._owned(session, account_id, record_id)
                if row is None:
                    return None
                for name, value in self._clean(values).items():
                    setattr(row, name, value)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"{self._model.__tablename__}.update: constraint violation")
            raise ConflictError() from exc
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"{self._model.__tablename__}.update: store failure")
            raise StoreFailure() from exc

    def delete(self, account_id: int, record_id: int) -> bool:
        try:
            with self._db.session_scope() as session:
                row = self._owned(session, account_id, record_id)
                if row is None:
                    return False
                session.delete(row)
                return True
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"{self._model.__tablename__}.delete: store failure")
            raise StoreFailure() from exc
