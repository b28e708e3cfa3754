"""Teacher routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from app.services import teacher as teacher_service

router = APIRouter(prefix="/teachers", tags=["Teachers"])


@router.get("", response_model=list[TeacherResponse])
async def list_teachers(
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all teachers."""
    return await teacher_service.get_teachers(db)


@router.post("", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(
    teacher_data: TeacherCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Create a new teacher. Returns 409 if the email is taken."""
    return await teacher_service.create_teacher(db, teacher_data)


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Get a teacher by ID."""
    teacher = await teacher_service.get_teacher_by_id(db, teacher_id)
    if not teacher:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Teacher not found",
        )
    return teacher


@router.patch("/{teacher_id}", response_model=TeacherResponse)
async def update_teacher(
    teacher_id: int,
    teacher_data: TeacherUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update a teacher."""
    return await teacher_service.update_teacher(db, teacher_id, teacher_data)


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a teacher. Their homeroom classes become unassigned."""
    await teacher_service.delete_teacher(db, teacher_id)
