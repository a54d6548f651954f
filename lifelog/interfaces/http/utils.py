# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import request


def json_body() -> dict[str, Any]:
    """The request's JSON object, or an empty dict for anything else."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


__all__ = ["json_body"]
