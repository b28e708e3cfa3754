"""Leaderboard API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.leaderboard import ClassLeaderboardEntry, StudentLeaderboardEntry
from app.services import leaderboard as leaderboard_service

router = APIRouter(prefix="/leaderboards", tags=["Leaderboards"])

Limit = Annotated[int | None, Query(ge=1, description="Keep only the top N entries")]


@router.get("/students", response_model=list[StudentLeaderboardEntry])
async def get_student_leaderboard(
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: Limit = None,
):
    """
    Rank active students by total deposits.

    Returns total deposits, transaction count and current balance per student.
    """
    return await leaderboard_service.get_student_leaderboard(db, limit)


@router.get("/classes", response_model=list[ClassLeaderboardEntry])
async def get_class_leaderboard(
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: Limit = None,
):
    """
    Rank classes by the total deposits of their active students.

    Returns active student count and average net balance per active student.
    """
    return await leaderboard_service.get_class_leaderboard(db, limit)


@router.get("/classes/{class_id}/students", response_model=list[StudentLeaderboardEntry])
async def get_student_leaderboard_by_class(
    class_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: Limit = None,
):
    """Rank active students within one class. Unknown classes give an empty list."""
    return await leaderboard_service.get_student_leaderboard_by_class(db, class_id, limit)


@router.get("/teachers/{teacher_id}/students", response_model=list[StudentLeaderboardEntry])
async def get_student_leaderboard_by_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: Limit = None,
):
    """Rank active students in a teacher's homeroom classes. Unknown teachers give an empty list."""
    return await leaderboard_service.get_student_leaderboard_by_teacher(db, teacher_id, limit)
