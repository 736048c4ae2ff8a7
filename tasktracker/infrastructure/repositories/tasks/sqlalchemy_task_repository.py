# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from tasktracker.domain.tasks.entities import Priority
from tasktracker.domain.tasks.entities import Task as DomainTask
from tasktracker.domain.tasks.repositories import TaskRepository
from tasktracker.infrastructure.db.models import Task
from tasktracker.infrastructure.resilience import RetryPolicy, store_operation
from tasktracker.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Task) -> DomainTask:
    return DomainTask(
        id=row.id,
        owner_id=row.owner_id,
        title=row.title,
        description=row.description or "",
        priority=Priority(row.priority),
        completed=bool(row.completed),
        due_date=row.due_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    """Every query filters on ``owner_id``; a foreign task id behaves as absent."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._retry_policy = retry_policy

    @staticmethod
    def _owned(session: Session, owner_id: str, task_id: str) -> Task | None:
        return session.scalars(
            select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
        ).first()

    @store_operation()
    def add(self, task: DomainTask) -> DomainTask:
        with unit_of_work_scope(self._session_factory) as session:
            row = Task(
                id=task.id,
                owner_id=task.owner_id,
                title=task.title,
                description=task.description,
                priority=task.priority,
                completed=task.completed,
                due_date=task.due_date,
                created_at=task.created_at,
                updated_at=task.updated_at,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    @store_operation(idempotent=True)
    def list_for_owner(self, owner_id: str) -> Sequence[DomainTask]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Task)
                .where(Task.owner_id == owner_id)
                # equal timestamps fall back to id so the order is stable
                .order_by(Task.created_at.desc(), Task.id.desc())
            ).all()
            return [_to_domain(row) for row in rows]

    @store_operation(idempotent=True)
    def get_for_owner(self, owner_id: str, task_id: str) -> DomainTask | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._owned(session, owner_id, task_id)
            return _to_domain(row) if row else None

    @store_operation()
    def update_for_owner(
        self, owner_id: str, task_id: str, changes: Mapping[str, Any], *, now: datetime
    ) -> DomainTask | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._owned(session, owner_id, task_id)
            if row is None:
                return None
            current = _to_domain(row)
            updated = current.with_changes(changes, now=now)
            if updated is not current:
                row.title = updated.title
                row.description = updated.description
                row.priority = updated.priority
                row.completed = updated.completed
                row.due_date = updated.due_date
                row.updated_at = updated.updated_at
                session.flush()
            return _to_domain(row)

    @store_operation(idempotent=True)
    def delete_for_owner(self, owner_id: str, task_id: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(
                delete(Task).where(Task.id == task_id, Task.owner_id == owner_id)
            )
            return bool(result.rowcount)

    @store_operation(idempotent=True)
    def count_for_owner(
        self,
        owner_id: str,
        *,
        completed: bool | None = None,
        priority: Priority | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(Task).where(Task.owner_id == owner_id)
        if completed is not None:
            stmt = stmt.where(Task.completed.is_(completed))
        if priority is not None:
            stmt = stmt.where(Task.priority == priority)
        with unit_of_work_scope(self._session_factory) as session:
            return int(session.scalar(stmt) or 0)
