from .entities import Account, AccountView, AuthResult, SessionToken
from .exceptions import DuplicateAccountError, InvalidCredentialsError, Unauthenticated
from .repositories import AccountRepository, PasswordHasher, SessionTokenCodec

__all__ = [
    "Account",
    "AccountRepository",
    "AccountView",
    "AuthResult",
    "DuplicateAccountError",
    "InvalidCredentialsError",
    "PasswordHasher",
    "SessionToken",
    "SessionTokenCodec",
    "Unauthenticated",
]
