"""Pydantic schemas for user accounts."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from workshophub.core.roles import Role


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: Role = Role.PARTICIPANT

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    """Public identity attached to other records (never carries the credential)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class UserResponse(UserSummary):
    role: Role
    created_at: datetime | None = None


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse
