# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .tasks import Priority, Task, TaskNotFoundError, TaskStats
from .users import TokenClaims, User

__all__ = [
    "InvariantViolation",
    "InvariantViolationError",
    "Priority",
    "Task",
    "TaskNotFoundError",
    "TaskStats",
    "TokenClaims",
    "User",
]
