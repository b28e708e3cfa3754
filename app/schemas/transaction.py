"""Savings transaction schemas."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.models.transaction import TransactionType
from app.schemas.validators import Money, PatchModel


class TransactionCreate(BaseModel):
    """Schema for recording a deposit or withdrawal."""

    student_id: int
    date: datetime.date
    type: TransactionType
    amount: Money = Field(description="Positive amount; direction comes from type")
    notes: str | None = None


class TransactionUpdate(PatchModel):
    """Schema for updating a transaction."""

    required_fields = frozenset({"student_id", "date", "type", "amount"})

    student_id: int | None = None
    date: datetime.date | None = None
    type: TransactionType | None = None
    amount: Money | None = None
    notes: str | None = None


class TransactionFilter(BaseModel):
    """Optional filters for transaction listings and reports. Fields combine with AND."""

    student_id: int | None = None
    class_id: int | None = None
    start_date: datetime.date | None = Field(None, description="Inclusive")
    end_date: datetime.date | None = Field(None, description="Inclusive")
    type: TransactionType | None = None


class TransactionResponse(BaseModel):
    """Schema for transaction response."""

    id: int
    student_id: int
    date: datetime.date
    type: TransactionType
    amount: Decimal
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionReportRow(BaseModel):
    """Transaction joined with its student's and class's names."""

    transaction_id: int
    date: datetime.date
    type: TransactionType
    amount: Decimal
    notes: str | None
    student_name: str
    class_name: str

    model_config = ConfigDict(from_attributes=True)
