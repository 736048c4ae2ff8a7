# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.domain.tasks.exceptions import TaskNotFoundError
from tasktracker.domain.tasks.repositories import TaskRepository
from tasktracker.shared.logging import logger


class DeleteTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: str, task_id: str) -> None:
        if not self._tasks.delete_for_owner(owner_id, task_id):
            logger.info(f"tasks.delete: not_found user_id={owner_id} task_id={task_id}")
            raise TaskNotFoundError()
        logger.info(f"tasks.delete: ok user_id={owner_id} task_id={task_id}")
