# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import MUTABLE_FIELDS, Priority, Task, TaskStats, parse_priority, validate_changes
from .exceptions import TaskNotFoundError
from .repositories import TaskRepository

__all__ = [
    "MUTABLE_FIELDS",
    "Priority",
    "Task",
    "TaskNotFoundError",
    "TaskRepository",
    "TaskStats",
    "parse_priority",
    "validate_changes",
]
