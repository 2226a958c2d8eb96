"""Pydantic schemas for the workshop catalog."""

import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workshophub.users.schemas import UserSummary


class WorkshopBase(BaseModel):
    """Base workshop schema."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    time: Optional[str] = Field(None, max_length=20)
    venue: Optional[str] = Field(None, max_length=200)
    seats: int = Field(default=0, ge=0)


class WorkshopCreate(WorkshopBase):
    """Schema for creating a workshop."""
    instructor: Optional[UUID] = None


class WorkshopUpdate(BaseModel):
    """Schema for updating a workshop. Only fields that are sent are changed."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    time: Optional[str] = Field(None, max_length=20)
    venue: Optional[str] = Field(None, max_length=200)
    seats: Optional[int] = Field(None, ge=0)
    instructor: Optional[UUID] = None


class WorkshopResponse(WorkshopBase):
    """Schema for workshop response."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    instructor: Optional[UserSummary] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None


class WorkshopSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    date: Optional[datetime.date] = None


class WorkshopDetail(BaseModel):
    """A workshop together with its active registration count."""
    workshop: WorkshopResponse
    registrations: int
    seats_left: int
