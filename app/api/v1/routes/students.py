"""Student routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.student import (
    StudentBalanceResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)
from app.services import student as student_service
from app.services import transaction as transaction_service

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=list[StudentResponse])
async def list_students(
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all students."""
    return await student_service.get_students(db)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_data: StudentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """
    Create a new student.

    - 404 if the class does not exist
    - 409 if the NISN or NIS is already registered
    """
    student = await student_service.create_student(db, student_data)
    return StudentResponse.model_validate(student)


@router.get("/by-class/{class_id}", response_model=list[StudentResponse])
async def list_students_by_class(
    class_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List students enrolled in a class."""
    return await student_service.get_students_by_class(db, class_id)


@router.get("/by-teacher/{teacher_id}", response_model=list[StudentResponse])
async def list_students_by_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List students in the teacher's homeroom classes."""
    return await student_service.get_students_by_teacher(db, teacher_id)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """Get a specific student by ID."""
    student = await student_service.get_student_by_id(db, student_id)

    if not student:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )

    return StudentResponse.model_validate(student)


@router.get("/{student_id}/balance", response_model=StudentBalanceResponse)
async def get_student_balance(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentBalanceResponse:
    """Get a student's net savings balance (deposits minus withdrawals)."""
    balance = await transaction_service.get_student_balance(db, student_id)
    return StudentBalanceResponse(student_id=student_id, balance=balance)


@router.patch("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    student_data: StudentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """Update a student. Only supplied fields change."""
    student = await student_service.update_student(db, student_id, student_data)
    return StudentResponse.model_validate(student)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a student. Returns 409 while the student has transactions or aspirations."""
    await student_service.delete_student(db, student_id)
