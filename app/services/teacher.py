"""Teacher service."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.teacher import Teacher
from app.schemas.teacher import TeacherCreate, TeacherUpdate

logger = logging.getLogger(__name__)


async def get_teacher_by_id(db: AsyncSession, teacher_id: int) -> Teacher | None:
    """Get teacher by ID."""
    result = await db.execute(select(Teacher).where(Teacher.id == teacher_id))
    return result.scalar_one_or_none()


async def require_teacher(db: AsyncSession, teacher_id: int) -> Teacher:
    """Get teacher by ID or raise NotFoundError."""
    teacher = await get_teacher_by_id(db, teacher_id)
    if teacher is None:
        raise NotFoundError("Teacher", teacher_id)
    return teacher


async def get_teachers(db: AsyncSession) -> list[Teacher]:
    """Get all teachers."""
    result = await db.execute(select(Teacher).order_by(Teacher.id))
    return list(result.scalars().all())


async def create_teacher(db: AsyncSession, teacher_data: TeacherCreate) -> Teacher:
    """Create a new teacher. Emails are unique across teachers."""
    teacher = Teacher(
        name=teacher_data.name,
        email=teacher_data.email,
        role=teacher_data.role,
    )
    db.add(teacher)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected teacher with email %s: %s", teacher_data.email, exc.orig)
        raise ConflictError(f"Teacher with email {teacher_data.email} already exists") from exc
    await db.refresh(teacher)

    logger.info("Created teacher %s", teacher.id)
    return teacher


async def update_teacher(
    db: AsyncSession,
    teacher_id: int,
    teacher_data: TeacherUpdate,
) -> Teacher:
    """Update a teacher."""
    teacher = await require_teacher(db, teacher_id)
    update_data = teacher_data.model_dump(exclude_unset=True)

    for field, value in update_data.items():
        setattr(teacher, field, value)
    teacher.touch()

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected update of teacher %s: %s", teacher_id, exc.orig)
        raise ConflictError(f"Teacher with email {teacher_data.email} already exists") from exc
    await db.refresh(teacher)

    logger.info("Updated teacher %s", teacher.id)
    return teacher


async def delete_teacher(db: AsyncSession, teacher_id: int) -> None:
    """Delete a teacher. Classes they were homeroom teacher of become unassigned."""
    teacher = await require_teacher(db, teacher_id)
    await db.delete(teacher)
    await db.commit()

    logger.info("Deleted teacher %s", teacher_id)
