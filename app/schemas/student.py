"""Student schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field

from app.models.student import Gender, StudentStatus
from app.schemas.validators import NonEmptyStr, PatchModel


class StudentCreate(BaseModel):
    """Schema for creating a new student."""

    name: NonEmptyStr
    gender: Gender
    nisn: str = Field(..., min_length=1, max_length=50)
    nis: str = Field(..., min_length=1, max_length=50)
    class_id: int
    phone: str | None = Field(None, max_length=50)
    email: EmailStr | None = None

    # Bank account
    bank_name: str | None = Field(None, max_length=100)
    account_number: str | None = Field(None, max_length=50)

    status: StudentStatus = StudentStatus.ACTIVE


class StudentUpdate(PatchModel):
    """Schema for updating a student."""

    required_fields = frozenset({"name", "gender", "nisn", "nis", "class_id", "status"})

    name: NonEmptyStr | None = None
    gender: Gender | None = None
    nisn: str | None = Field(None, min_length=1, max_length=50)
    nis: str | None = Field(None, min_length=1, max_length=50)
    class_id: int | None = None
    phone: str | None = Field(None, max_length=50)
    email: EmailStr | None = None

    # Bank account
    bank_name: str | None = Field(None, max_length=100)
    account_number: str | None = Field(None, max_length=50)

    status: StudentStatus | None = None


class StudentResponse(BaseModel):
    """Student response schema."""

    id: int
    name: str
    gender: Gender
    nisn: str
    nis: str
    class_id: int
    phone: str | None
    email: str | None
    bank_name: str | None
    account_number: str | None
    status: StudentStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class StudentBalanceResponse(BaseModel):
    """Net savings balance of a student."""

    student_id: int
    balance: Decimal = Field(description="Deposits minus withdrawals")
