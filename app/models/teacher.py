"""Teacher model."""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import BaseModel


class TeacherRole(str, Enum):
    """Teacher role within the school."""

    HOMEROOM_TEACHER = "homeroom_teacher"
    OTHER = "other"


class Teacher(BaseModel):
    """Teacher model."""

    __tablename__ = "teachers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    role: Mapped[TeacherRole] = mapped_column(String(20), nullable=False)

    # Relationships
    homeroom_classes: Mapped[list["SchoolClass"]] = relationship(
        "SchoolClass", back_populates="homeroom_teacher"
    )

    def __repr__(self) -> str:
        return f"<Teacher(id={self.id}, email={self.email})>"
