# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktracker.domain.users.entities import User as DomainUser
from tasktracker.domain.users.entities import normalize_email
from tasktracker.domain.users.exceptions import UserAlreadyExistsError
from tasktracker.domain.users.repositories import UserRepository
from tasktracker.infrastructure.db.models import User
from tasktracker.infrastructure.resilience import RetryPolicy, store_operation
from tasktracker.infrastructure.unit_of_work import unit_of_work_scope
from tasktracker.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._retry_policy = retry_policy

    def _find_one(self, *criteria) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(*criteria)).first()
            return _to_domain(row) if row else None

    @store_operation(idempotent=True)
    def find_by_email(self, email: str) -> DomainUser | None:
        return self._find_one(User.email == normalize_email(email))

    @store_operation(idempotent=True)
    def find_by_username(self, username: str) -> DomainUser | None:
        return self._find_one(User.username == username)

    @store_operation(idempotent=True)
    def find_by_id(self, user_id: str) -> DomainUser | None:
        return self._find_one(User.id == user_id)

    @store_operation()
    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    id=user.id,
                    username=user.username,
                    email=normalize_email(user.email),
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # a concurrent registration won the unique constraint
            logger.info("users.add: unique constraint rejected insert")
            raise UserAlreadyExistsError() from exc
