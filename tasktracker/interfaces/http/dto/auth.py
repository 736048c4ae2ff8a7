from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from tasktracker.domain.users.entities import User, normalize_email


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)

    model_config = ConfigDict(extra="forbid", strict=True)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login

    model_config = ConfigDict(extra="forbid", strict=True)


class UserDTO(BaseModel):
    id: str
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(id=user.id, username=user.username, email=user.email)


class AuthSuccessDTO(BaseModel):
    user: UserDTO
    token: str


class CurrentUserDTO(BaseModel):
    user: UserDTO
