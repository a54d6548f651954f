# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from lifelog.application.use_cases.users.login_user import (
    CREDENTIALS_REQUIRED,
    LoginUserUseCase,
)
from lifelog.application.use_cases.users.register_user import (
    FIELDS_REQUIRED,
    RegisterUserUseCase,
)
from lifelog.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from lifelog.interfaces.http.utils import json_body
from lifelog.shared.errors.base import ValidationError as AppValidationError
from lifelog.shared.errors.validation import raise_validation_error
from lifelog.shared.middleware.rate_limit import rate_limit


def _require(payload: dict[str, Any], names: tuple[str, ...], message: str) -> None:
    if not all(payload.get(name) for name in names):
        raise AppValidationError(message=message)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        rate_limit_enabled: bool = True,
        rate_limit_requests: int = 10,
        rate_limit_window: float = 60.0,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._rate_limit_enabled = rate_limit_enabled
        self._rate_limit_requests = rate_limit_requests
        self._rate_limit_window = rate_limit_window

    def register(self) -> tuple[Response, int]:
        payload = json_body()
        _require(payload, ("username", "email", "password"), FIELDS_REQUIRED)
        try:
            dto = RegisterRequestDTO.model_validate(payload)
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._register_use_case.execute(dto.username, dto.email, dto.password)
        return jsonify(AuthSuccessDTO.from_result(result).model_dump()), 201

    def login(self) -> tuple[Response, int]:
        payload = json_body()
        _require(payload, ("username", "password"), CREDENTIALS_REQUIRED)
        try:
            dto = LoginRequestDTO.model_validate(payload)
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.username, dto.password)
        return jsonify(AuthSuccessDTO.from_result(result).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        limited = rate_limit(
            self._rate_limit_requests,
            self._rate_limit_window,
            enabled=self._rate_limit_enabled,
        )
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=limited(self.register), methods=["POST"])
        bp.add_url_rule("/login", view_func=limited(self.login), methods=["POST"])
        return bp
