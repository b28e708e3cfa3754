"""API v1 router aggregating all route modules."""

from fastapi import APIRouter

from app.api.v1.routes import (
    aspirations,
    classes,
    leaderboards,
    schools,
    students,
    teachers,
    transactions,
)

api_router = APIRouter()

api_router.include_router(schools.router)
api_router.include_router(teachers.router)
api_router.include_router(classes.router)
api_router.include_router(students.router)
api_router.include_router(transactions.router)
api_router.include_router(aspirations.router)
api_router.include_router(leaderboards.router)
