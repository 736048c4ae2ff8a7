# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from tasktracker.application.services.access_guard import AccessGuard
from tasktracker.application.use_cases.users.login_user import LoginUserUseCase
from tasktracker.application.use_cases.users.register_user import RegisterUserUseCase
from tasktracker.interfaces.http.auth import auth_required, current_user
from tasktracker.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    CurrentUserDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from tasktracker.interfaces.http.parsing import parse_json_body
from tasktracker.shared.logging import logger
from tasktracker.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limited


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        access_guard: AccessGuard,
        rate_limiter: InMemoryRateLimiter | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._access_guard = access_guard
        self._rate_limiter = rate_limiter

    @rate_limited
    def register(self) -> tuple[Response, int]:
        dto = parse_json_body(RegisterRequestDTO)
        user, token = self._register_use_case.execute(dto.username, dto.email, dto.password)
        payload = AuthSuccessDTO(user=UserDTO.from_user(user), token=token).model_dump()
        return jsonify(payload), 201

    @rate_limited
    def login(self) -> tuple[Response, int]:
        dto = parse_json_body(LoginRequestDTO)
        user, token = self._login_use_case.execute(dto.email, dto.password)
        payload = AuthSuccessDTO(user=UserDTO.from_user(user), token=token).model_dump()
        response = jsonify(payload)
        response.headers["Cache-Control"] = "no-store"
        return response, 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        user = current_user()
        logger.info(f"auth.me: ok user_id={user.id}")
        return jsonify(CurrentUserDTO(user=UserDTO.from_user(user)).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
