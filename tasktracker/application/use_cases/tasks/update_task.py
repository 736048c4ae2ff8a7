# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from tasktracker.domain.tasks.entities import Task, validate_changes
from tasktracker.domain.tasks.exceptions import TaskNotFoundError
from tasktracker.domain.tasks.repositories import TaskRepository
from tasktracker.shared.logging import logger


class UpdateTaskUseCase:
    """Partial update: only the keys present in ``changes`` are written.

    A task owned by someone else is reported exactly like a missing one.
    Concurrent updates to the same task resolve last-write-wins.
    """

    def __init__(
        self,
        *,
        tasks: TaskRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._tasks = tasks
        self._clock = clock

    def execute(self, owner_id: str, task_id: str, changes: Mapping[str, Any]) -> Task:
        normalized = validate_changes(changes)
        task = self._tasks.update_for_owner(owner_id, task_id, normalized, now=self._clock())
        if task is None:
            logger.info(f"tasks.update: not_found user_id={owner_id} task_id={task_id}")
            raise TaskNotFoundError()
        logger.info(
            f"tasks.update: ok user_id={owner_id} task_id={task_id} "
            f"fields={sorted(normalized)}"
        )
        return task
