# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request gate for every account-scoped route."""

from __future__ import annotations

from flask import Blueprint, g, request

from lifelog.domain.users.exceptions import Unauthenticated
from lifelog.domain.users.repositories import SessionTokenCodec
from lifelog.shared.logging import logger


class AccessGuard:
    def __init__(self, tokens: SessionTokenCodec) -> None:
        self._tokens = tokens

    def authenticate(self, authorization: str | None) -> int:
        """Resolve an ``Authorization`` header value to an account id."""
        if not authorization:
            raise Unauthenticated.missing_token()

        scheme, _, token = authorization.strip().partition(" ")
        if scheme.lower() != "bearer":
            logger.info("auth.guard: unsupported authorization scheme")
            raise Unauthenticated.invalid_token()

        token = token.strip()
        if not token:
            raise Unauthenticated.missing_token()
        return self._tokens.resolve(token)

    def enforce(self) -> None:
        # CORS preflights never carry credentials.
        if request.method == "OPTIONS":
            return None
        try:
            g.account_id = self.authenticate(request.headers.get("Authorization"))
        except Unauthenticated as exc:
            logger.warning(f"Auth failed ({exc.code}) on {request.method} {request.path}")
            raise
        logger.debug(f"Auth OK: account={g.account_id} {request.method} {request.path}")
        return None

    def protect(self, bp: Blueprint) -> Blueprint:
        bp.before_request(self.enforce)
        return bp


def current_account_id() -> int:
    """The account id the guard attached to this request."""
    account_id = getattr(g, "account_id", None)
    if account_id is None:
        raise Unauthenticated.missing_token()
    return int(account_id)


__all__ = ["AccessGuard", "current_account_id"]
