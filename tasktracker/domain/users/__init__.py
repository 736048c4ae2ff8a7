# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenClaims, User, normalize_email
from .exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserAlreadyExistsError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    "normalize_email",
]
