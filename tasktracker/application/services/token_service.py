# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless signed session tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from itsdangerous import BadData, URLSafeSerializer

from tasktracker.domain.users.entities import TokenClaims
from tasktracker.domain.users.exceptions import ExpiredTokenError, InvalidTokenError
from tasktracker.domain.users.repositories import TokenService

DEFAULT_TOKEN_TTL = timedelta(days=7)

_SALT = "tasktracker.session-token"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SignedTokenService(TokenService):
    """Issues and validates ``{sub, iat, exp}`` payloads signed with the server secret.

    Tokens are never stored: a token is valid for as long as its signature
    matches the current secret and its ``exp`` lies in the future. Changing
    the secret invalidates every token issued before.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self._serializer = URLSafeSerializer(secret_key, salt=_SALT)
        self._ttl = ttl
        self._clock = clock

    def issue(self, owner_id: str) -> str:
        issued_at = int(self._clock().timestamp())
        expires_at = issued_at + int(self._ttl.total_seconds())
        return self._serializer.dumps({"sub": owner_id, "iat": issued_at, "exp": expires_at})

    def decode(self, token: str) -> TokenClaims:
        try:
            payload: Any = self._serializer.loads(token)
        except BadData as exc:
            raise InvalidTokenError() from exc

        claims = self._parse_claims(payload)
        if self._clock() >= claims.expires_at:
            raise ExpiredTokenError()
        return claims

    def validate(self, token: str) -> str:
        return self.decode(token).owner_id

    @staticmethod
    def _parse_claims(payload: Any) -> TokenClaims:
        if not isinstance(payload, dict):
            raise InvalidTokenError()
        subject = payload.get("sub")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError()
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise InvalidTokenError()
        if isinstance(issued_at, bool) or isinstance(expires_at, bool) or expires_at < issued_at:
            raise InvalidTokenError()
        return TokenClaims(
            owner_id=subject,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )


__all__ = ["DEFAULT_TOKEN_TTL", "SignedTokenService"]
