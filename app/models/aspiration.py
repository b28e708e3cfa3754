"""Student aspiration model."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import BaseModel


class StudentAspiration(BaseModel):
    """Something a student is saving towards."""

    __tablename__ = "student_aspirations"

    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    target_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Relationships
    student: Mapped["Student"] = relationship("Student", back_populates="aspirations")

    def __repr__(self) -> str:
        return f"<StudentAspiration(id={self.id}, student={self.student_id})>"
