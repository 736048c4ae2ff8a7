# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_task import CreateTaskInput, CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .get_task import GetTaskUseCase
from .get_task_stats import GetTaskStatsUseCase
from .list_tasks import ListTasksUseCase
from .update_task import UpdateTaskUseCase

__all__ = [
    "CreateTaskInput",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskStatsUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
]
