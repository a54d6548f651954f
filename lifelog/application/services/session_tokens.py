# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, self-contained session tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from lifelog.domain.users.entities import SessionToken
from lifelog.domain.users.exceptions import Unauthenticated
from lifelog.domain.users.repositories import SessionTokenCodec
from lifelog.shared.logging import logger


class JwtSessionTokenCodec(SessionTokenCodec):
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, account_id: int, *, now: datetime | None = None) -> SessionToken:
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + self._ttl
        claims = {
            "sub": str(account_id),
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        logger.debug(f"session.issue: account={account_id} exp={expires_at.isoformat()}")
        return SessionToken(account_id=account_id, token=token, expires_at=expires_at)

    def resolve(self, token: str) -> int:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
            return int(claims["sub"])
        except jwt.ExpiredSignatureError:
            logger.info("session.resolve: token expired")
        except jwt.InvalidTokenError as exc:
            logger.info(f"session.resolve: rejected ({type(exc).__name__})")
        except (TypeError, ValueError):
            logger.info("session.resolve: non-integer subject")
        raise Unauthenticated.invalid_token()
