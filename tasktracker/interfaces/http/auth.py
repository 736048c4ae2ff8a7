# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import wraps
from typing import cast

from flask import Request, g, request

from tasktracker.application.services.access_guard import AccessGuard
from tasktracker.domain.users.entities import User
from tasktracker.shared.errors import UnauthenticatedError


class AuthedRequest(Request):
    user_id: str


def authed_request() -> AuthedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthedRequest, request)


def current_user() -> User:
    user = getattr(g, "current_user", None)
    if user is None:
        raise UnauthenticatedError()
    return user


def auth_required(f):
    """Resolve the bearer token through the controller's ``_access_guard``.

    The resolved owner is exposed as ``authed_request().user_id`` and
    ``g.current_user``; failures raise ``UnauthenticatedError`` before the
    view runs.
    """

    @wraps(f)
    def inner(self, *a, **kw):
        guard: AccessGuard = self._access_guard
        user = guard.resolve(request.headers.get("Authorization"))
        setattr(request, "user_id", user.id)
        g.user_id = user.id
        g.current_user = user
        return f(self, *a, **kw)

    return inner
