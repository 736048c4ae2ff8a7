# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.shared.errors.base import ConflictError, UnauthenticatedError


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "user already exists"


class InvalidCredentialsError(UnauthenticatedError):
    code = "invalid_credentials"
    message = "invalid credentials"


class InvalidTokenError(UnauthenticatedError):
    code = "invalid_token"
    message = "token signature or payload is invalid"


class ExpiredTokenError(UnauthenticatedError):
    code = "token_expired"
    message = "token has expired"
