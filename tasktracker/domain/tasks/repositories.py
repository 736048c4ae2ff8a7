# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol

from .entities import Priority, Task


class TaskRepository(Protocol):
    """Task storage. Every method is scoped to ``owner_id``."""

    def add(self, task: Task) -> Task: ...

    def list_for_owner(self, owner_id: str) -> Sequence[Task]: ...

    def get_for_owner(self, owner_id: str, task_id: str) -> Task | None: ...

    def update_for_owner(
        self, owner_id: str, task_id: str, changes: Mapping[str, Any], *, now: datetime
    ) -> Task | None: ...

    def delete_for_owner(self, owner_id: str, task_id: str) -> bool: ...

    def count_for_owner(
        self,
        owner_id: str,
        *,
        completed: bool | None = None,
        priority: Priority | None = None,
    ) -> int: ...
