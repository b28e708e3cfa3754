# Database models

from app.models.school import School
from app.models.teacher import Teacher, TeacherRole
from app.models.school_class import SchoolClass
from app.models.student import Gender, Student, StudentStatus
from app.models.transaction import Transaction, TransactionType
from app.models.aspiration import StudentAspiration

__all__ = [
    "School",
    "Teacher",
    "TeacherRole",
    "SchoolClass",
    "Student",
    "Gender",
    "StudentStatus",
    "Transaction",
    "TransactionType",
    "StudentAspiration",
]
