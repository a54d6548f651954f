from .base import (
    AppError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    StoreFailure,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "StoreFailure",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
