from .auth import AuthSuccessDTO, CurrentUserDTO, LoginRequestDTO, RegisterRequestDTO, UserDTO
from .tasks import (
    CreateTaskRequestDTO,
    DeleteTaskResponseDTO,
    TaskDTO,
    TaskStatsDTO,
    UpdateTaskRequestDTO,
)

__all__ = [
    "AuthSuccessDTO",
    "CreateTaskRequestDTO",
    "CurrentUserDTO",
    "DeleteTaskResponseDTO",
    "LoginRequestDTO",
    "RegisterRequestDTO",
    "TaskDTO",
    "TaskStatsDTO",
    "UpdateTaskRequestDTO",
    "UserDTO",
]
