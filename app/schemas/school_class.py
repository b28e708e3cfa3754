"""Schemas for school classes."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.validators import PatchModel


class SchoolClassCreate(BaseModel):
    """Schema for creating a new school class."""

    name: str = Field(..., min_length=1, max_length=100)
    homeroom_teacher_id: int | None = None


class SchoolClassUpdate(PatchModel):
    """Schema for updating a school class. Sending homeroom_teacher_id=null unassigns the teacher."""

    required_fields = frozenset({"name"})

    name: str | None = Field(None, min_length=1, max_length=100)
    homeroom_teacher_id: int | None = None


class SchoolClassResponse(BaseModel):
    """School class response schema."""

    id: int
    name: str
    homeroom_teacher_id: int | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
