"""Student aspiration routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.aspiration import (
    StudentAspirationCreate,
    StudentAspirationResponse,
    StudentAspirationUpdate,
)
from app.services import aspiration as aspiration_service

router = APIRouter(prefix="/aspirations", tags=["Aspirations"])


@router.get("", response_model=list[StudentAspirationResponse])
async def list_aspirations(
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all student aspirations."""
    return await aspiration_service.get_aspirations(db)


@router.post("", response_model=StudentAspirationResponse, status_code=status.HTTP_201_CREATED)
async def create_aspiration(
    aspiration_data: StudentAspirationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Create a savings goal for a student."""
    return await aspiration_service.create_aspiration(db, aspiration_data)


@router.get("/by-student/{student_id}", response_model=list[StudentAspirationResponse])
async def list_aspirations_by_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await aspiration_service.get_aspirations_by_student(db, student_id)


@router.get("/by-class/{class_id}", response_model=list[StudentAspirationResponse])
async def list_aspirations_by_class(
    class_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await aspiration_service.get_aspirations_by_class(db, class_id)


@router.get("/by-teacher/{teacher_id}", response_model=list[StudentAspirationResponse])
async def list_aspirations_by_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await aspiration_service.get_aspirations_by_teacher(db, teacher_id)


@router.get("/{aspiration_id}", response_model=StudentAspirationResponse)
async def get_aspiration(
    aspiration_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Get a student aspiration by ID."""
    aspiration = await aspiration_service.get_aspiration_by_id(db, aspiration_id)
    if not aspiration:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student aspiration not found",
        )
    return aspiration


@router.patch("/{aspiration_id}", response_model=StudentAspirationResponse)
async def update_aspiration(
    aspiration_id: int,
    aspiration_data: StudentAspirationUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update a student aspiration."""
    return await aspiration_service.update_aspiration(db, aspiration_id, aspiration_data)


@router.delete("/{aspiration_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_aspiration(
    aspiration_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a student aspiration."""
    await aspiration_service.delete_aspiration(db, aspiration_id)
