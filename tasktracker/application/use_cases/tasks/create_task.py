# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from tasktracker.domain.tasks.entities import Priority, Task
from tasktracker.domain.tasks.repositories import TaskRepository
from tasktracker.shared.logging import logger


@dataclass(slots=True, frozen=True)
class CreateTaskInput:
    title: str
    description: str = ""
    priority: Priority | str = Priority.MEDIUM
    completed: bool = False
    due_date: datetime | None = None


class CreateTaskUseCase:
    def __init__(
        self,
        *,
        tasks: TaskRepository,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._tasks = tasks
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, owner_id: str, data: CreateTaskInput) -> Task:
        task = Task.new(
            id=self._id_factory(),
            owner_id=owner_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            completed=data.completed,
            due_date=data.due_date,
            now=self._clock(),
        )
        persisted = self._tasks.add(task)
        logger.info(f"tasks.create: ok user_id={owner_id} task_id={persisted.id}")
        return persisted
