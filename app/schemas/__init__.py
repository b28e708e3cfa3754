"""Pydantic schemas."""

from app.schemas.aspiration import (
    StudentAspirationCreate,
    StudentAspirationResponse,
    StudentAspirationUpdate,
)
from app.schemas.leaderboard import ClassLeaderboardEntry, StudentLeaderboardEntry
from app.schemas.school import SchoolCreate, SchoolResponse, SchoolUpdate
from app.schemas.school_class import SchoolClassCreate, SchoolClassResponse, SchoolClassUpdate
from app.schemas.student import (
    StudentBalanceResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from app.schemas.transaction import (
    TransactionCreate,
    TransactionFilter,
    TransactionReportRow,
    TransactionResponse,
    TransactionUpdate,
)

__all__ = [
    # School
    "SchoolCreate",
    "SchoolUpdate",
    "SchoolResponse",
    # Teacher
    "TeacherCreate",
    "TeacherUpdate",
    "TeacherResponse",
    # Class
    "SchoolClassCreate",
    "SchoolClassUpdate",
    "SchoolClassResponse",
    # Student
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "StudentBalanceResponse",
    # Transaction
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionFilter",
    "TransactionResponse",
    "TransactionReportRow",
    # Aspiration
    "StudentAspirationCreate",
    "StudentAspirationUpdate",
    "StudentAspirationResponse",
    # Leaderboard
    "StudentLeaderboardEntry",
    "ClassLeaderboardEntry",
]
