# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import AccessGuard, SignedTokenService, WerkzeugPasswordHasher
from .use_cases.tasks import (
    CreateTaskInput,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "AccessGuard",
    "CreateTaskInput",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskStatsUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SignedTokenService",
    "UpdateTaskUseCase",
    "WerkzeugPasswordHasher",
]
