"""Pydantic models for user endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

NAME_MAX_LENGTH = 100


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class _UserPayload(BaseModel):
    """Mutable user fields shared by create and update requests."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            msg = "name must not be empty"
            raise ValueError(msg)
        return value


class UserCreateRequest(_UserPayload):
    """Payload for creating a new user."""


class UserUpdateRequest(_UserPayload):
    """Payload for replacing an existing user's name and email."""
