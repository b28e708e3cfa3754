"""School schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.schemas.validators import PatchModel


class SchoolCreate(BaseModel):
    """Schema for creating the school record."""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    phone: str | None = Field(None, max_length=50)
    email: EmailStr | None = None


class SchoolUpdate(PatchModel):
    """Schema for updating the school record."""

    required_fields = frozenset({"name", "address"})

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, min_length=1, max_length=500)
    phone: str | None = Field(None, max_length=50)
    email: EmailStr | None = None


class SchoolResponse(BaseModel):
    """School response schema."""

    id: int
    name: str
    address: str
    phone: str | None
    email: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
