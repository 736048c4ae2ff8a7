# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tasktracker.domain.users.entities import User, normalize_email
from tasktracker.domain.users.exceptions import UserAlreadyExistsError
from tasktracker.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from tasktracker.shared.errors import ValidationError
from tasktracker.shared.logging import logger

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 64
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128

_EMAIL_ADAPTER: TypeAdapter[str] = TypeAdapter(EmailStr)


def _new_id() -> str:
    return uuid.uuid4().hex


def _is_valid_email(email: str) -> bool:
    try:
        _EMAIL_ADAPTER.validate_python(email)
    except PydanticValidationError:
        return False
    return True


def validate_registration(username: str, email: str, password: str) -> None:
    invalid: list[str] = []
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        invalid.append("username")
    if not _is_valid_email(email):
        invalid.append("email")
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        invalid.append("password")
    if invalid:
        raise ValidationError(
            f"invalid fields: {', '.join(invalid)}", context={"fields": invalid}
        )


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
        email = normalize_email(email)
        validate_registration(username, email, password)

        # Fast path only; the unique constraints in the store decide races.
        if self._users.find_by_username(username) or self._users.find_by_email(email):
            logger.info(f"auth.register: conflict username={username}")
            raise UserAlreadyExistsError()

        user = User(
            id=self._id_factory(),
            username=username,
            email=email,
            password_hash=self._password_hasher.hash(password),
            created_at=self._clock(),
        )
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.id)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, token
