"""School service."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.school import School
from app.schemas.school import SchoolCreate, SchoolUpdate

logger = logging.getLogger(__name__)


async def get_school(db: AsyncSession) -> School | None:
    """Get the school record (the first one, single-school system)."""
    result = await db.execute(select(School).order_by(School.id).limit(1))
    return result.scalar_one_or_none()


async def get_school_by_id(db: AsyncSession, school_id: int) -> School | None:
    """Get school by ID."""
    result = await db.execute(select(School).where(School.id == school_id))
    return result.scalar_one_or_none()


async def create_school(db: AsyncSession, school_data: SchoolCreate) -> School:
    """Create a new school."""
    school = School(
        name=school_data.name,
        address=school_data.address,
        phone=school_data.phone,
        email=school_data.email,
    )

    db.add(school)
    await db.commit()
    await db.refresh(school)

    logger.info("Created school %s", school.id)
    return school


async def update_school(
    db: AsyncSession,
    school_id: int,
    school_data: SchoolUpdate,
) -> School:
    """Update a school. Only fields present in the request change."""
    school = await get_school_by_id(db, school_id)
    if school is None:
        raise NotFoundError("School", school_id)

    update_data = school_data.model_dump(exclude_unset=True)

    for field, value in update_data.items():
        setattr(school, field, value)
    school.touch()

    await db.commit()
    await db.refresh(school)

    logger.info("Updated school %s (%s)", school.id, ", ".join(update_data) or "no fields")
    return school
