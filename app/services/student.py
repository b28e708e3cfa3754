"""Student service."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.school_class import SchoolClass
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate
from app.services.school_class import require_school_class
from app.services.teacher import require_teacher

logger = logging.getLogger(__name__)


async def get_student_by_id(db: AsyncSession, student_id: int) -> Student | None:
    """Get student by ID."""
    result = await db.execute(select(Student).where(Student.id == student_id))
    return result.scalar_one_or_none()


async def require_student(db: AsyncSession, student_id: int) -> Student:
    """Get student by ID or raise NotFoundError."""
    student = await get_student_by_id(db, student_id)
    if student is None:
        raise NotFoundError("Student", student_id)
    return student


async def get_students(db: AsyncSession) -> list[Student]:
    """Get all students."""
    result = await db.execute(select(Student).order_by(Student.id))
    return list(result.scalars().all())


async def get_students_by_class(db: AsyncSession, class_id: int) -> list[Student]:
    """Get all students enrolled in a class. The class must exist."""
    await require_school_class(db, class_id)
    result = await db.execute(
        select(Student).where(Student.class_id == class_id).order_by(Student.id)
    )
    return list(result.scalars().all())


async def get_students_by_teacher(db: AsyncSession, teacher_id: int) -> list[Student]:
    """Get students across every class the teacher is homeroom teacher of."""
    await require_teacher(db, teacher_id)
    result = await db.execute(
        select(Student)
        .join(SchoolClass, Student.class_id == SchoolClass.id)
        .where(SchoolClass.homeroom_teacher_id == teacher_id)
        .order_by(Student.id)
    )
    return list(result.scalars().all())


async def create_student(db: AsyncSession, student_data: StudentCreate) -> Student:
    """Create a new student."""
    await require_school_class(db, student_data.class_id)

    student = Student(
        name=student_data.name,
        gender=student_data.gender,
        nisn=student_data.nisn,
        nis=student_data.nis,
        class_id=student_data.class_id,
        phone=student_data.phone,
        email=student_data.email,
        bank_name=student_data.bank_name,
        account_number=student_data.account_number,
        status=student_data.status,
    )

    db.add(student)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected student nisn=%s nis=%s: %s", student_data.nisn, student_data.nis, exc.orig)
        raise ConflictError(
            "Student conflicts with existing data: duplicate NISN or NIS, or the class no longer exists"
        ) from exc
    await db.refresh(student)

    logger.info("Created student %s", student.id)
    return student


async def update_student(
    db: AsyncSession,
    student_id: int,
    student_data: StudentUpdate,
) -> Student:
    """Update a student."""
    student = await require_student(db, student_id)
    update_data = student_data.model_dump(exclude_unset=True)

    if "class_id" in update_data and update_data["class_id"] != student.class_id:
        await require_school_class(db, update_data["class_id"])

    for field, value in update_data.items():
        setattr(student, field, value)
    student.touch()

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected update of student %s: %s", student_id, exc.orig)
        raise ConflictError(
            "Student conflicts with existing data: duplicate NISN or NIS, or the class no longer exists"
        ) from exc
    await db.refresh(student)

    logger.info("Updated student %s", student.id)
    return student


async def delete_student(db: AsyncSession, student_id: int) -> None:
    """Delete a student. Fails while the student still has transactions or aspirations."""
    student = await require_student(db, student_id)
    await db.delete(student)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected deletion of student %s: %s", student_id, exc.orig)
        raise ConflictError(
            f"Student with id {student_id} still has transactions or aspirations"
        ) from exc

    logger.info("Deleted student %s", student_id)
