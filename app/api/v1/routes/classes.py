"""School classes API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.school_class import (
    SchoolClassCreate,
    SchoolClassResponse,
    SchoolClassUpdate,
)
from app.services import school_class as school_class_service

router = APIRouter(prefix="/classes", tags=["Classes"])


@router.get("", response_model=list[SchoolClassResponse])
async def list_classes(
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all school classes."""
    return await school_class_service.get_school_classes(db)


@router.post(
    "",
    response_model=SchoolClassResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_class(
    class_data: SchoolClassCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Create a new school class. The homeroom teacher, if given, must exist."""
    return await school_class_service.create_school_class(db, class_data)


@router.get("/by-teacher/{teacher_id}", response_model=list[SchoolClassResponse])
async def list_classes_by_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List the classes a teacher is homeroom teacher of."""
    return await school_class_service.get_school_classes_by_teacher(db, teacher_id)


@router.get("/{class_id}", response_model=SchoolClassResponse)
async def get_class(
    class_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Get a school class by ID."""
    school_class = await school_class_service.get_school_class_by_id(db, class_id)
    if not school_class:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Class not found",
        )
    return school_class


@router.patch("/{class_id}", response_model=SchoolClassResponse)
async def update_class(
    class_id: int,
    class_data: SchoolClassUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update a school class."""
    return await school_class_service.update_school_class(db, class_id, class_data)


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(
    class_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Delete a school class. Returns 409 while students are enrolled in it."""
    await school_class_service.delete_school_class(db, class_id)
