# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.domain.users.entities import User
from tasktracker.domain.users.exceptions import ExpiredTokenError, InvalidTokenError
from tasktracker.domain.users.repositories import TokenService, UserRepository
from tasktracker.shared.errors import UnauthenticatedError
from tasktracker.shared.logging import logger

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    token = token.strip()
    return token or None


class AccessGuard:
    """Turns an ``Authorization`` header into a live :class:`User` or fails closed.

    Every failure surfaces as the same :class:`UnauthenticatedError`; the
    precise reason is only logged.
    """

    def __init__(self, *, tokens: TokenService, users: UserRepository) -> None:
        self._tokens = tokens
        self._users = users

    def resolve(self, authorization: str | None) -> User:
        token = extract_bearer_token(authorization)
        if token is None:
            reason = "missing header" if not authorization else "malformed header"
            logger.info(f"auth.guard: rejected ({reason})")
            raise UnauthenticatedError()

        try:
            owner_id = self._tokens.validate(token)
        except ExpiredTokenError as exc:
            logger.info("auth.guard: rejected (token expired)")
            raise UnauthenticatedError() from exc
        except InvalidTokenError as exc:
            logger.warning("auth.guard: rejected (invalid signature or payload)")
            raise UnauthenticatedError() from exc

        user = self._users.find_by_id(owner_id)
        if user is None:
            logger.warning(f"auth.guard: rejected (token subject {owner_id} has no user)")
            raise UnauthenticatedError()

        logger.debug(f"auth.guard: ok user={user.id}")
        return user


__all__ = ["AccessGuard", "extract_bearer_token"]
