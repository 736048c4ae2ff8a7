# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.domain.tasks.entities import Task
from tasktracker.domain.tasks.exceptions import TaskNotFoundError
from tasktracker.domain.tasks.repositories import TaskRepository


class GetTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: str, task_id: str) -> Task:
        task = self._tasks.get_for_owner(owner_id, task_id)
        if task is None:
            raise TaskNotFoundError()
        return task
