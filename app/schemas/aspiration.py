"""Student aspiration schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.validators import Money, PatchModel


class StudentAspirationCreate(BaseModel):
    """Schema for creating a student aspiration."""

    student_id: int
    description: str = Field(..., min_length=1)
    target_amount: Money


class StudentAspirationUpdate(PatchModel):
    """Schema for updating a student aspiration."""

    required_fields = frozenset({"student_id", "description", "target_amount"})

    student_id: int | None = None
    description: str | None = Field(None, min_length=1)
    target_amount: Money | None = None


class StudentAspirationResponse(BaseModel):
    """Schema for student aspiration response."""

    id: int
    student_id: int
    description: str
    target_amount: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
