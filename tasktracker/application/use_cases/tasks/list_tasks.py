# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from tasktracker.domain.tasks.entities import Task
from tasktracker.domain.tasks.repositories import TaskRepository


class ListTasksUseCase:
    """Owner's tasks, newest first."""

    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: str) -> Sequence[Task]:
        return self._tasks.list_for_owner(owner_id)
