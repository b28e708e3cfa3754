"""Student model."""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import BaseModel


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class StudentStatus(str, Enum):
    """Enrollment status. Only active students are ranked on leaderboards."""

    ACTIVE = "active"
    GRADUATED = "graduated"
    TRANSFERRED = "transferred"


class Student(BaseModel):
    """Student model - owner of a savings account."""

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[Gender] = mapped_column(String(10), nullable=False)
    nisn: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)  # national student number
    nis: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)  # school student number
    class_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("classes.id"),
        nullable=False,
        index=True,
    )
    phone: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(255))

    # Bank account for withdrawals
    bank_name: Mapped[str | None] = mapped_column(String(100))
    account_number: Mapped[str | None] = mapped_column(String(50))

    status: Mapped[StudentStatus] = mapped_column(
        String(20),
        nullable=False,
        default=StudentStatus.ACTIVE,
        server_default="active",
    )

    # Relationships
    school_class: Mapped["SchoolClass"] = relationship("SchoolClass", back_populates="students")
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="student", passive_deletes="all"
    )
    aspirations: Mapped[list["StudentAspiration"]] = relationship(
        "StudentAspiration", back_populates="student", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, name={self.name})>"
