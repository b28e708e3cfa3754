"""Teacher schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.models.teacher import TeacherRole
from app.schemas.validators import PatchModel


class TeacherCreate(BaseModel):
    """Schema for creating a teacher."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role: TeacherRole


class TeacherUpdate(PatchModel):
    """Schema for updating a teacher."""

    required_fields = frozenset({"name", "email", "role"})

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    role: TeacherRole | None = None


class TeacherResponse(BaseModel):
    """Teacher response schema."""

    id: int
    name: str
    email: str
    role: TeacherRole
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
