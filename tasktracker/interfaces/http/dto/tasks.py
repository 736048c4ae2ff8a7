from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tasktracker.application.use_cases.tasks.create_task import CreateTaskInput
from tasktracker.domain.tasks.entities import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Priority,
    Task,
    TaskStats,
)

PriorityName = Literal["low", "medium", "high"]

# Request bodies: camelCase keys, no unknown keys, no type coercion.
_REQUEST_CONFIG = ConfigDict(extra="forbid", strict=True, alias_generator=to_camel)
_RESPONSE_CONFIG = ConfigDict(
    from_attributes=True,
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class CreateTaskRequestDTO(BaseModel):
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
    priority: PriorityName = "medium"
    completed: bool = False
    due_date: datetime | None = None

    model_config = _REQUEST_CONFIG

    def to_input(self) -> CreateTaskInput:
        return CreateTaskInput(
            title=self.title,
            description=self.description,
            priority=Priority(self.priority),
            completed=self.completed,
            due_date=self.due_date,
        )


class UpdateTaskRequestDTO(BaseModel):
    """Every field optional; only keys present in the body are applied."""

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    priority: PriorityName | None = None
    completed: bool | None = None
    due_date: datetime | None = None

    model_config = _REQUEST_CONFIG

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskDTO(BaseModel):
    id: str
    owner_id: str
    title: str
    description: str
    priority: Priority
    completed: bool
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = _RESPONSE_CONFIG

    @classmethod
    def dump(cls, task: Task) -> dict[str, Any]:
        return cls.model_validate(task).model_dump(mode="json", by_alias=True)


class TaskStatsDTO(BaseModel):
    total: int
    completed: int
    pending: int
    high_priority: int

    model_config = _RESPONSE_CONFIG

    @classmethod
    def dump(cls, stats: TaskStats) -> dict[str, Any]:
        return cls.model_validate(stats).model_dump(mode="json", by_alias=True)


class DeleteTaskResponseDTO(BaseModel):
    success: bool = True
