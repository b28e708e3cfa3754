"""SchoolClass model."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import BaseModel


class SchoolClass(BaseModel):
    """SchoolClass model for grouping students under a homeroom teacher."""

    __tablename__ = "classes"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    homeroom_teacher_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("teachers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    homeroom_teacher: Mapped["Teacher | None"] = relationship(
        "Teacher", back_populates="homeroom_classes"
    )
    students: Mapped[list["Student"]] = relationship(
        "Student", back_populates="school_class", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<SchoolClass(id={self.id}, name={self.name})>"
