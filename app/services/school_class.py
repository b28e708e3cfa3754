"""SchoolClass service layer."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.school_class import SchoolClass
from app.schemas.school_class import SchoolClassCreate, SchoolClassUpdate
from app.services.teacher import require_teacher

logger = logging.getLogger(__name__)


async def get_school_class_by_id(db: AsyncSession, class_id: int) -> SchoolClass | None:
    """Get a school class by ID."""
    result = await db.execute(select(SchoolClass).where(SchoolClass.id == class_id))
    return result.scalar_one_or_none()


async def require_school_class(db: AsyncSession, class_id: int) -> SchoolClass:
    """Get a school class by ID or raise NotFoundError."""
    school_class = await get_school_class_by_id(db, class_id)
    if school_class is None:
        raise NotFoundError("Class", class_id)
    return school_class


async def get_school_classes(db: AsyncSession) -> list[SchoolClass]:
    """Get all school classes."""
    result = await db.execute(select(SchoolClass).order_by(SchoolClass.id))
    return list(result.scalars().all())


async def get_school_classes_by_teacher(db: AsyncSession, teacher_id: int) -> list[SchoolClass]:
    """Get the classes a teacher is homeroom teacher of. The teacher must exist."""
    await require_teacher(db, teacher_id)
    result = await db.execute(
        select(SchoolClass)
        .where(SchoolClass.homeroom_teacher_id == teacher_id)
        .order_by(SchoolClass.id)
    )
    return list(result.scalars().all())


async def create_school_class(db: AsyncSession, class_data: SchoolClassCreate) -> SchoolClass:
    """Create a new school class."""
    if class_data.homeroom_teacher_id is not None:
        await require_teacher(db, class_data.homeroom_teacher_id)

    school_class = SchoolClass(
        name=class_data.name,
        homeroom_teacher_id=class_data.homeroom_teacher_id,
    )
    db.add(school_class)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning(
            "Rejected class with teacher %s: %s", class_data.homeroom_teacher_id, exc.orig
        )
        raise ConflictError(
            f"Teacher with id {class_data.homeroom_teacher_id} no longer exists"
        ) from exc
    await db.refresh(school_class)

    logger.info("Created class %s", school_class.id)
    return school_class


async def update_school_class(
    db: AsyncSession, class_id: int, class_data: SchoolClassUpdate
) -> SchoolClass:
    """Update a school class."""
    school_class = await require_school_class(db, class_id)
    update_data = class_data.model_dump(exclude_unset=True)

    # Explicit null unassigns; any other value must point at a real teacher
    if update_data.get("homeroom_teacher_id") is not None:
        await require_teacher(db, update_data["homeroom_teacher_id"])

    for field, value in update_data.items():
        setattr(school_class, field, value)
    school_class.touch()

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected update of class %s: %s", class_id, exc.orig)
        raise ConflictError(
            f"Class with id {class_id} references a teacher that no longer exists"
        ) from exc
    await db.refresh(school_class)

    logger.info("Updated class %s", school_class.id)
    return school_class


async def delete_school_class(db: AsyncSession, class_id: int) -> None:
    """Delete a school class. Fails while students are still enrolled in it."""
    school_class = await require_school_class(db, class_id)
    await db.delete(school_class)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected deletion of class %s: %s", class_id, exc.orig)
        raise ConflictError(f"Class with id {class_id} still has students") from exc

    logger.info("Deleted class %s", class_id)
