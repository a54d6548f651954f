from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from lifelog.app import create_app
from lifelog.application.services.session_tokens import JwtSessionTokenCodec
from lifelog.container import Container
from lifelog.domain.users.entities import Account
from lifelog.domain.users.exceptions import DuplicateAccountError
from lifelog.domain.users.repositories import AccountRepository, PasswordHasher
from lifelog.shared.config import AppConfig, DatabaseConfig, SecurityConfig

SECRET = "test-signing-secret-0123456789abcdef"


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._seq = 1
        self.adds = 0

    def find_by_login(self, identifier: str) -> Account | None:
        for account in self._accounts.values():
            if identifier in (account.username, account.email):
                return account
        return None

    def add(self, account: Account) -> Account:
        self.adds += 1
        for existing in self._accounts.values():
            if account.username == existing.username or account.email == existing.email:
                raise DuplicateAccountError()
        stored = Account(
            id=self._seq,
            username=account.username,
            email=account.email,
            password_hash=account.password_hash,
            created_at=account.created_at,
        )
        self._seq += 1
        self._accounts[stored.id] = stored
        return stored


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


def make_config(tmp_path: Path, **security: object) -> AppConfig:
    security_values: dict[str, object] = {
        "JWT_SECRET": SECRET,
        # Cheap work factor keeps the suite fast; production uses scrypt.
        "PASSWORD_HASH_METHOD": "pbkdf2:sha256:1000",
        "HASH_WORKERS": 2,
        "ENABLE_RATE_LIMIT": False,
    }
    security_values.update(security)
    return AppConfig(
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'lifelog-test.db'}"),
        security=SecurityConfig(**security_values),
    )


@pytest.fixture()
def token_codec() -> JwtSessionTokenCodec:
    return JwtSessionTokenCodec(SECRET)


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path)


@pytest.fixture()
def container(app_config: AppConfig) -> Iterator[Container]:
    container = Container(app_config)
    yield container
    container.close()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client


def register(client: FlaskClient, username: str, email: str, password: str):
    return client.post(
        "/auth/register",
        json={"username": username, "email": email, "password": password},
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
