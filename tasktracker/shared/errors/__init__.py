from .base import (
    AppError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InternalError,
    NotFoundError,
    RateLimitedError,
    UnauthenticatedError,
    UnavailableError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "NotFoundError",
    "RateLimitedError",
    "UnauthenticatedError",
    "UnavailableError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
