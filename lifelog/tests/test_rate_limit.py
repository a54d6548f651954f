from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from flask.testing import FlaskClient

from lifelog.app import create_app
from lifelog.container import Container
from lifelog.shared.middleware.rate_limit import InMemoryRateLimiter
from lifelog.tests.conftest import make_config


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def limited_client(tmp_path: Path) -> Iterator[Callable[..., FlaskClient]]:
    containers: list[Container] = []

    def build(**security: object) -> FlaskClient:
        config = make_config(tmp_path, ENABLE_RATE_LIMIT=True, RL_LIMIT=2, **security)
        container = Container(config)
        containers.append(container)
        return create_app(container=container).test_client()

    yield build
    for container in containers:
        container.close()


def _login(client: FlaskClient, forwarded_for: str):
    return client.post(
        "/auth/login",
        json={"username": "mallory", "password": "guess"},
        headers={"X-Forwarded-For": forwarded_for},
    )


def test_limiter_blocks_after_limit_and_recovers() -> None:
    clock = FakeClock()
    limiter = InMemoryRateLimiter(2, 60, clock=clock)

    assert limiter.allow("a")
    assert limiter.allow("a")
    assert not limiter.allow("a")
    assert limiter.allow("b")

    clock.now += 61
    assert limiter.allow("a")


def test_limiter_evicts_idle_buckets() -> None:
    clock = FakeClock()
    limiter = InMemoryRateLimiter(1, 10, clock=clock)

    for i in range(50):
        limiter.allow(f"10.0.0.{i}")
    assert len(limiter) == 50

    clock.now += 11
    limiter.allow("10.0.0.200")

    assert len(limiter) == 1


def test_spoofed_forwarded_for_does_not_reset_limit(
    limited_client: Callable[..., FlaskClient],
) -> None:
    client = limited_client()

    statuses = [_login(client, f"10.0.0.{i}").status_code for i in range(6)]

    assert statuses[:2] == [400, 400]
    assert set(statuses[2:]) == {429}


def test_forwarded_for_honoured_behind_trusted_proxy(
    limited_client: Callable[..., FlaskClient],
) -> None:
    client = limited_client(TRUSTED_PROXY_COUNT=1)

    distinct = [_login(client, f"10.0.0.{i}").status_code for i in range(4)]
    repeated = [_login(client, "10.0.1.1").status_code for _ in range(3)]

    assert distinct == [400, 400, 400, 400]
    assert repeated == [400, 400, 429]
