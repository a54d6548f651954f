# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import date

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from lifelog.application.services.quotes import FALLBACK_QUOTE, QuoteBook
from lifelog.interfaces.http.utils import json_body
from lifelog.interfaces.http.dto.resources import QuoteRequestDTO
from lifelog.shared.errors.base import ValidationError as AppValidationError
from lifelog.shared.errors.validation import raise_validation_error


class QuotesController:
    def __init__(self, *, quotes: QuoteBook) -> None:
        self._quotes = quotes

    def daily(self) -> tuple[Response, int]:
        raw = request.args.get("date")
        if raw:
            try:
                day = date.fromisoformat(raw)
            except ValueError:
                raise AppValidationError(message="date must be YYYY-MM-DD") from None
        else:
            day = date.today()
        return jsonify({"quote": self._quotes.daily(day), "date": day.isoformat()}), 200

    def for_mood(self) -> tuple[Response, int]:
        try:
            dto = QuoteRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        quote = self._quotes.for_mood(dto.mood or "")
        if quote is None:
            return jsonify({"quote": FALLBACK_QUOTE}), 404
        return jsonify({"quote": quote}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("quotes", __name__)
        bp.add_url_rule("/daily", view_func=self.daily, methods=["GET"])
        bp.add_url_rule("/quote", view_func=self.for_mood, methods=["POST"])
        return bp
