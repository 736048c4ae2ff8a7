# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task entities and the rules that hold for every stored task."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from tasktracker.domain.exceptions import InvariantViolation

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000

# Fields a client may change after creation.
MUTABLE_FIELDS = frozenset({"title", "description", "priority", "completed", "due_date"})


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def parse_priority(value: Priority | str) -> Priority:
    try:
        return Priority(value)
    except ValueError as exc:
        raise InvariantViolation(
            "priority must be one of low, medium, high", field="priority"
        ) from exc


def as_utc(value: datetime | None) -> datetime | None:
    """Naive timestamps are read as UTC; aware ones are converted to UTC."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def normalize_title(title: str) -> str:
    cleaned = title.strip()
    if not cleaned:
        raise InvariantViolation("title must not be empty", field="title")
    if len(cleaned) > TITLE_MAX_LENGTH:
        raise InvariantViolation(
            f"title must be at most {TITLE_MAX_LENGTH} characters", field="title"
        )
    return cleaned


def normalize_description(description: str) -> str:
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise InvariantViolation(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    return description


def validate_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Check a partial update and return it with normalized values.

    Only :data:`MUTABLE_FIELDS` may appear. ``due_date`` may be ``None`` to
    clear it; every other field must carry a value.
    """

    unknown = set(changes) - MUTABLE_FIELDS
    if unknown:
        field = sorted(unknown)[0]
        raise InvariantViolation("field cannot be updated", field=field)

    normalized: dict[str, Any] = {}
    for field, value in changes.items():
        if value is None and field != "due_date":
            raise InvariantViolation("value must not be null", field=field)
        if field == "title":
            normalized[field] = normalize_title(value)
        elif field == "description":
            normalized[field] = normalize_description(value)
        elif field == "priority":
            normalized[field] = parse_priority(value)
        elif field == "completed":
            normalized[field] = bool(value)
        else:
            normalized[field] = as_utc(value)
    return normalized


@dataclass(slots=True, frozen=True)
class Task:
    """A to-do item owned by exactly one user."""

    id: str
    owner_id: str
    title: str
    created_at: datetime
    updated_at: datetime
    description: str = ""
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    due_date: datetime | None = None

    def __post_init__(self) -> None:
        if not self.owner_id:
            raise InvariantViolation("task must have an owner", field="owner_id")
        if not self.title or not self.title.strip():
            raise InvariantViolation("title must not be empty", field="title")
        object.__setattr__(self, "priority", parse_priority(self.priority))

    @classmethod
    def new(
        cls,
        *,
        id: str,
        owner_id: str,
        title: str,
        now: datetime,
        description: str = "",
        priority: Priority | str = Priority.MEDIUM,
        completed: bool = False,
        due_date: datetime | None = None,
    ) -> Task:
        return cls(
            id=id,
            owner_id=owner_id,
            title=normalize_title(title),
            description=normalize_description(description),
            priority=parse_priority(priority),
            completed=completed,
            due_date=as_utc(due_date),
            created_at=now,
            updated_at=now,
        )

    def with_changes(self, changes: Mapping[str, Any], *, now: datetime) -> Task:
        """Return a copy with ``changes`` applied; unspecified fields stay as they are."""

        normalized = validate_changes(changes)
        if not normalized:
            return self
        return replace(self, updated_at=now, **normalized)


@dataclass(slots=True, frozen=True)
class TaskStats:
    """Per-owner counts; ``pending`` is derived so it always matches the other two."""

    total: int
    completed: int
    high_priority: int

    def __post_init__(self) -> None:
        if self.total < 0 or self.completed < 0 or self.high_priority < 0:
            raise InvariantViolation("counts cannot be negative")

    @property
    def pending(self) -> int:
        return self.total - self.completed
