# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP controller for the owner-scoped task endpoints."""

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify

from tasktracker.application.services.access_guard import AccessGuard
from tasktracker.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from tasktracker.interfaces.http.auth import auth_required, authed_request
from tasktracker.interfaces.http.dto.tasks import (
    CreateTaskRequestDTO,
    DeleteTaskResponseDTO,
    TaskDTO,
    TaskStatsDTO,
    UpdateTaskRequestDTO,
)
from tasktracker.interfaces.http.parsing import parse_json_body
from tasktracker.shared.logging import logger


class TasksController:
    """Every route requires a bearer token; the owner always comes from it."""

    def __init__(
        self,
        *,
        access_guard: AccessGuard,
        create_task: CreateTaskUseCase,
        list_tasks: ListTasksUseCase,
        get_task: GetTaskUseCase,
        update_task: UpdateTaskUseCase,
        delete_task: DeleteTaskUseCase,
        get_stats: GetTaskStatsUseCase,
    ) -> None:
        self._access_guard = access_guard
        self._create_task = create_task
        self._list_tasks = list_tasks
        self._get_task = get_task
        self._update_task = update_task
        self._delete_task = delete_task
        self._get_stats = get_stats

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")

        bp.add_url_rule("", view_func=self.list_tasks, methods=["GET"], endpoint="tasks_list")
        bp.add_url_rule("", view_func=self.create_task, methods=["POST"], endpoint="task_create")
        bp.add_url_rule("/stats", view_func=self.stats, methods=["GET"], endpoint="tasks_stats")
        bp.add_url_rule(
            "/<task_id>", view_func=self.get_task, methods=["GET"], endpoint="task_get"
        )
        bp.add_url_rule(
            "/<task_id>",
            view_func=self.update_task,
            methods=["PUT", "PATCH"],
            endpoint="task_update",
        )
        bp.add_url_rule(
            "/<task_id>", view_func=self.delete_task, methods=["DELETE"], endpoint="task_delete"
        )

        return bp

    @auth_required
    def list_tasks(self) -> tuple[Response, int]:
        t0 = perf_counter()
        user_id = authed_request().user_id
        tasks = self._list_tasks.execute(user_id)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"tasks.list: ok (user_id={user_id}, count={len(tasks)}, dt_ms={dt:.0f})")
        return jsonify([TaskDTO.dump(task) for task in tasks]), 200

    @auth_required
    def create_task(self) -> tuple[Response, int]:
        user_id = authed_request().user_id
        dto = parse_json_body(CreateTaskRequestDTO)
        task = self._create_task.execute(user_id, dto.to_input())
        return jsonify(TaskDTO.dump(task)), 201

    @auth_required
    def get_task(self, task_id: str) -> tuple[Response, int]:
        task = self._get_task.execute(authed_request().user_id, task_id)
        return jsonify(TaskDTO.dump(task)), 200

    @auth_required
    def update_task(self, task_id: str) -> tuple[Response, int]:
        user_id = authed_request().user_id
        dto = parse_json_body(UpdateTaskRequestDTO)
        task = self._update_task.execute(user_id, task_id, dto.to_changes())
        return jsonify(TaskDTO.dump(task)), 200

    @auth_required
    def delete_task(self, task_id: str) -> tuple[Response, int]:
        self._delete_task.execute(authed_request().user_id, task_id)
        return jsonify(DeleteTaskResponseDTO().model_dump()), 200

    @auth_required
    def stats(self) -> tuple[Response, int]:
        t0 = perf_counter()
        user_id = authed_request().user_id
        stats = self._get_stats.execute(user_id)
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"tasks.stats: ok (user_id={user_id}, total={stats.total}, dt_ms={dt:.0f})"
        )
        response = jsonify(TaskStatsDTO.dump(stats))
        response.headers["Cache-Control"] = "no-store"
        return response, 200
