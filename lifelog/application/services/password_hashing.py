"""Password hashing strategies."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from werkzeug.security import check_password_hash, generate_password_hash

from lifelog.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted werkzeug hashes computed on a bounded worker pool.

    The calling request waits only on its own future, so a burst of logins
    cannot occupy more than ``workers`` cores with key derivation.
    """

    def __init__(self, method: str = "scrypt", *, workers: int = 4) -> None:
        self._method = method
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pwhash")

    def hash(self, password: str) -> str:
        future = self._executor.submit(generate_password_hash, password, method=self._method)
        return str(future.result())

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        future = self._executor.submit(check_password_hash, hashed, password)
        return bool(future.result())

    def close(self) -> None:
        self._executor.shutdown(wait=True)
