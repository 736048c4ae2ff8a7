# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from tasktracker.domain.users.entities import User, normalize_email
from tasktracker.domain.users.exceptions import InvalidCredentialsError
from tasktracker.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from tasktracker.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def _unknown_user_hash(self) -> str:
        # Unknown e-mails still pay for one hash verification.
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._dummy_hash

    def execute(self, email: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_email(normalize_email(email))
        hashed = user.password_hash if user else self._unknown_user_hash()
        password_valid = self._password_hasher.verify(password, hashed)

        if user is None or not password_valid:
            logger.info("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token
