# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from tasktracker.application.services.access_guard import AccessGuard
from tasktracker.application.services.password_hashing import WerkzeugPasswordHasher
from tasktracker.application.services.token_service import SignedTokenService
from tasktracker.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from tasktracker.application.use_cases.users.login_user import LoginUserUseCase
from tasktracker.application.use_cases.users.register_user import RegisterUserUseCase
from tasktracker.infrastructure.db import Database
from tasktracker.infrastructure.repositories.tasks.sqlalchemy_task_repository import (
    SqlAlchemyTaskRepository,
)
from tasktracker.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from tasktracker.infrastructure.resilience import RetryPolicy
from tasktracker.interfaces.http.controllers.auth_controller import AuthController
from tasktracker.interfaces.http.controllers.misc_controller import MiscController
from tasktracker.interfaces.http.controllers.tasks_controller import TasksController
from tasktracker.shared.config import AppConfig
from tasktracker.shared.middleware.rate_limit import InMemoryRateLimiter


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def database(self) -> Database:
        return Database(self._config.database)

    @cached_property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy.from_config(self._config.resilience)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> SignedTokenService:
        return SignedTokenService(
            self._config.secret_key,
            ttl=timedelta(seconds=self._config.token_ttl_seconds),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(
            self.database.session_factory, retry_policy=self.retry_policy
        )

    @cached_property
    def task_repository(self) -> SqlAlchemyTaskRepository:
        return SqlAlchemyTaskRepository(
            self.database.session_factory, retry_policy=self.retry_policy
        )

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(tokens=self.token_service, users=self.user_repository)

    @cached_property
    def rate_limiter(self) -> InMemoryRateLimiter | None:
        return InMemoryRateLimiter.from_config(self._config.security)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            access_guard=self.access_guard,
            rate_limiter=self.rate_limiter,
        )

    @cached_property
    def tasks_controller(self) -> TasksController:
        tasks = self.task_repository
        return TasksController(
            access_guard=self.access_guard,
            create_task=CreateTaskUseCase(tasks=tasks),
            list_tasks=ListTasksUseCase(tasks=tasks),
            get_task=GetTaskUseCase(tasks=tasks),
            update_task=UpdateTaskUseCase(tasks=tasks),
            delete_task=DeleteTaskUseCase(tasks=tasks),
            get_stats=GetTaskStatsUseCase(tasks=tasks),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)

    def close(self) -> None:
        if "database" in self.__dict__:
            self.database.dispose()


__all__ = ["Container"]
