# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from tasktracker.shared.errors.validation import raise_validation_error

M = TypeVar("M", bound=BaseModel)


def parse_json_body(model: type[M]) -> M:
    """Validate the raw request body as JSON against ``model``.

    A missing body is treated as ``{}`` so required fields are reported
    individually instead of failing on the framing.
    """
    raw = request.get_data(cache=True)
    try:
        return model.model_validate_json(raw or b"{}")
    except ValidationError as exc:
        raise_validation_error(exc)
