# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import BaseModel, ValidationError

from lifelog.application.use_cases.resources.manage_owned import ManageOwnedResourceUseCase
from lifelog.interfaces.http.utils import json_body
from lifelog.interfaces.http.guard import AccessGuard, current_account_id
from lifelog.shared.errors.validation import raise_validation_error


class OwnedResourceController:
    """CRUD routes for one resource kind; every route sits behind the guard."""

    def __init__(
        self,
        *,
        name: str,
        url_prefix: str,
        dto: type[BaseModel],
        use_case: ManageOwnedResourceUseCase,
        guard: AccessGuard,
    ) -> None:
        self._name = name
        self._url_prefix = url_prefix
        self._dto = dto
        self._use_case = use_case
        self._guard = guard

    def _validated(self) -> dict:
        try:
            return self._dto.model_validate(json_body()).model_dump()
        except ValidationError as exc:
            raise_validation_error(exc)

    def list(self) -> tuple[Response, int]:
        records = self._use_case.list(current_account_id())
        return jsonify([record.to_dict() for record in records]), 200

    def get(self, record_id: int) -> tuple[Response, int]:
        record = self._use_case.get(current_account_id(), record_id)
        return jsonify(record.to_dict()), 200

    def create(self) -> tuple[Response, int]:
        record = self._use_case.create(current_account_id(), self._validated())
        return jsonify(record.to_dict()), 201

    def update(self, record_id: int) -> tuple[Response, int]:
        record = self._use_case.update(current_account_id(), record_id, self._validated())
        return jsonify(record.to_dict()), 200

    def delete(self, record_id: int) -> tuple[Response, int]:
        self._use_case.delete(current_account_id(), record_id)
        return jsonify({"message": "Deleted"}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint(self._name, __name__, url_prefix=self._url_prefix)
        self._guard.protect(bp)
        bp.add_url_rule("", endpoint="list", view_func=self.list, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<int:record_id>", endpoint="get", view_func=self.get, methods=["GET"])
        bp.add_url_rule(
            "/<int:record_id>", endpoint="update", view_func=self.update, methods=["PUT"]
        )
        bp.add_url_rule(
            "/<int:record_id>", endpoint="delete", view_func=self.delete, methods=["DELETE"]
        )
        return bp
