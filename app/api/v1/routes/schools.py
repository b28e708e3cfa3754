"""School routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.school import SchoolCreate, SchoolResponse, SchoolUpdate
from app.services import school as school_service

router = APIRouter(prefix="/school", tags=["School"])


@router.post("", response_model=SchoolResponse, status_code=status.HTTP_201_CREATED)
async def create_school(
    school_data: SchoolCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SchoolResponse:
    """Create the school record."""
    school = await school_service.create_school(db, school_data)
    return SchoolResponse.model_validate(school)


@router.get("", response_model=SchoolResponse | None)
async def get_school(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SchoolResponse | None:
    """Get the school record, or null if none has been created yet."""
    school = await school_service.get_school(db)
    if school is None:
        return None
    return SchoolResponse.model_validate(school)


@router.patch("/{school_id}", response_model=SchoolResponse)
async def update_school(
    school_id: int,
    school_data: SchoolUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SchoolResponse:
    """Update the school record. Only supplied fields change."""
    school = await school_service.update_school(db, school_id, school_data)
    return SchoolResponse.model_validate(school)
