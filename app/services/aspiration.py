"""Student aspiration service."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.aspiration import StudentAspiration
from app.models.school_class import SchoolClass
from app.models.student import Student
from app.schemas.aspiration import StudentAspirationCreate, StudentAspirationUpdate
from app.services.school_class import require_school_class
from app.services.student import require_student
from app.services.teacher import require_teacher

logger = logging.getLogger(__name__)


async def get_aspiration_by_id(db: AsyncSession, aspiration_id: int) -> StudentAspiration | None:
    """Get student aspiration by ID."""
    result = await db.execute(
        select(StudentAspiration).where(StudentAspiration.id == aspiration_id)
    )
    return result.scalar_one_or_none()


async def get_aspirations(db: AsyncSession) -> list[StudentAspiration]:
    """Get all student aspirations."""
    result = await db.execute(select(StudentAspiration).order_by(StudentAspiration.id))
    return list(result.scalars().all())


async def get_aspirations_by_student(db: AsyncSession, student_id: int) -> list[StudentAspiration]:
    """Get aspirations of a student. The student must exist."""
    await require_student(db, student_id)
    result = await db.execute(
        select(StudentAspiration)
        .where(StudentAspiration.student_id == student_id)
        .order_by(StudentAspiration.id)
    )
    return list(result.scalars().all())


async def get_aspirations_by_class(db: AsyncSession, class_id: int) -> list[StudentAspiration]:
    """Get aspirations of all students in a class. The class must exist."""
    await require_school_class(db, class_id)
    result = await db.execute(
        select(StudentAspiration)
        .join(Student, StudentAspiration.student_id == Student.id)
        .where(Student.class_id == class_id)
        .order_by(StudentAspiration.id)
    )
    return list(result.scalars().all())


async def get_aspirations_by_teacher(db: AsyncSession, teacher_id: int) -> list[StudentAspiration]:
    """
    Get aspirations of students in the teacher's homeroom classes.

    The teacher must exist; a teacher without a homeroom class gets an empty list.
    """
    await require_teacher(db, teacher_id)
    result = await db.execute(
        select(StudentAspiration)
        .join(Student, StudentAspiration.student_id == Student.id)
        .join(SchoolClass, Student.class_id == SchoolClass.id)
        .where(SchoolClass.homeroom_teacher_id == teacher_id)
        .order_by(StudentAspiration.id)
    )
    return list(result.scalars().all())


async def create_aspiration(
    db: AsyncSession, aspiration_data: StudentAspirationCreate
) -> StudentAspiration:
    """Create a new aspiration for an existing student."""
    await require_student(db, aspiration_data.student_id)

    aspiration = StudentAspiration(
        student_id=aspiration_data.student_id,
        description=aspiration_data.description,
        target_amount=aspiration_data.target_amount,
    )
    db.add(aspiration)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning(
            "Rejected aspiration for student %s: %s", aspiration_data.student_id, exc.orig
        )
        raise ConflictError(
            f"Student with id {aspiration_data.student_id} no longer exists"
        ) from exc
    await db.refresh(aspiration)

    logger.info("Created aspiration %s for student %s", aspiration.id, aspiration.student_id)
    return aspiration


async def update_aspiration(
    db: AsyncSession,
    aspiration_id: int,
    aspiration_data: StudentAspirationUpdate,
) -> StudentAspiration:
    """Update a student aspiration."""
    aspiration = await get_aspiration_by_id(db, aspiration_id)
    if aspiration is None:
        raise NotFoundError("Student aspiration", aspiration_id)

    update_data = aspiration_data.model_dump(exclude_unset=True)
    if "student_id" in update_data and update_data["student_id"] != aspiration.student_id:
        await require_student(db, update_data["student_id"])

    for field, value in update_data.items():
        setattr(aspiration, field, value)
    aspiration.touch()

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected update of aspiration %s: %s", aspiration_id, exc.orig)
        raise ConflictError(
            f"Student aspiration with id {aspiration_id} references a student that no longer exists"
        ) from exc
    await db.refresh(aspiration)

    logger.info("Updated aspiration %s", aspiration.id)
    return aspiration


async def delete_aspiration(db: AsyncSession, aspiration_id: int) -> None:
    """Delete a student aspiration."""
    aspiration = await get_aspiration_by_id(db, aspiration_id)
    if aspiration is None:
        raise NotFoundError("Student aspiration", aspiration_id)

    await db.delete(aspiration)
    await db.commit()

    logger.info("Deleted aspiration %s", aspiration_id)
