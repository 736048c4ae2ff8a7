# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.domain.tasks.entities import Priority, TaskStats
from tasktracker.domain.tasks.repositories import TaskRepository


class GetTaskStatsUseCase:
    """Counts over one owner's tasks.

    The three counts are read independently and may reflect slightly
    different moments under concurrent writes; ``pending`` is derived from
    ``total`` and ``completed`` and so never disagrees with them.
    """

    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: str) -> TaskStats:
        total = self._tasks.count_for_owner(owner_id)
        completed = self._tasks.count_for_owner(owner_id, completed=True)
        high_priority = self._tasks.count_for_owner(owner_id, priority=Priority.HIGH)
        return TaskStats(total=total, completed=completed, high_priority=high_priority)
