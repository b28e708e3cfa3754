"""Savings transaction model."""

import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import BaseModel


class TransactionType(str, Enum):
    """Direction of money movement on a savings account."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class Transaction(BaseModel):
    """A single deposit or withdrawal on a student's savings account."""

    __tablename__ = "transactions"

    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[TransactionType] = mapped_column(String(20), nullable=False)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
    )  # Always positive; sign comes from type
    notes: Mapped[str | None] = mapped_column(Text)

    # Relationships
    student: Mapped["Student"] = relationship("Student", back_populates="transactions")

    def __repr__(self) -> str:
        return f"<Transaction(id={self.id}, type={self.type}, amount={self.amount})>"
