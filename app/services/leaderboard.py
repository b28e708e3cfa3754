"""Leaderboard service - rankings of savings activity over active students."""

from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.school_class import SchoolClass
from app.models.student import Student, StudentStatus
from app.models.transaction import Transaction
from app.services.transaction import deposit_amount, signed_amount


def _student_leaderboard_query() -> Select:
    """Per-student totals for every active student, ranked by total deposits."""
    total_deposits = func.coalesce(func.sum(deposit_amount()), 0).label("total_deposits")

    return (
        select(
            Student.id.label("student_id"),
            Student.name.label("student_name"),
            SchoolClass.name.label("class_name"),
            total_deposits,
            func.count(Transaction.id).label("transaction_count"),
            func.coalesce(func.sum(signed_amount()), 0).label("current_balance"),
        )
        .join(SchoolClass, Student.class_id == SchoolClass.id)
        .outerjoin(Transaction, Transaction.student_id == Student.id)
        .where(Student.status == StudentStatus.ACTIVE)
        .group_by(Student.id, Student.name, SchoolClass.name)
        .order_by(total_deposits.desc(), Student.id)
    )


async def _run_student_leaderboard(
    db: AsyncSession, query: Select, limit: int | None
) -> list[dict]:
    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return [
        {
            "student_id": row.student_id,
            "student_name": row.student_name,
            "class_name": row.class_name,
            "total_deposits": Decimal(row.total_deposits),
            "transaction_count": row.transaction_count,
            "current_balance": Decimal(row.current_balance),
        }
        for row in result
    ]


async def get_student_leaderboard(db: AsyncSession, limit: int | None = None) -> list[dict]:
    """
    Rank active students by total deposits.

    Students without transactions are included with zero totals.
    """
    return await _run_student_leaderboard(db, _student_leaderboard_query(), limit)


async def get_student_leaderboard_by_class(
    db: AsyncSession, class_id: int, limit: int | None = None
) -> list[dict]:
    """Rank active students of one class. Unknown classes yield an empty list."""
    query = _student_leaderboard_query().where(Student.class_id == class_id)
    return await _run_student_leaderboard(db, query, limit)


async def get_student_leaderboard_by_teacher(
    db: AsyncSession, teacher_id: int, limit: int | None = None
) -> list[dict]:
    """
    Rank active students in the teacher's homeroom classes.

    Unknown teachers and teachers without a homeroom class yield an empty list.
    """
    query = _student_leaderboard_query().where(SchoolClass.homeroom_teacher_id == teacher_id)
    return await _run_student_leaderboard(db, query, limit)


async def get_class_leaderboard(db: AsyncSession, limit: int | None = None) -> list[dict]:
    """
    Rank classes by the total deposits of their active students.

    average_balance is the mean net balance per active student (students without
    transactions count as 0), rounded to cents. Classes without active students
    appear with zero totals.
    """
    # Subquery for per-student totals
    student_totals = (
        select(
            Student.id.label("student_id"),
            Student.class_id.label("class_id"),
            func.coalesce(func.sum(deposit_amount()), 0).label("deposits"),
            func.coalesce(func.sum(signed_amount()), 0).label("balance"),
        )
        .outerjoin(Transaction, Transaction.student_id == Student.id)
        .where(Student.status == StudentStatus.ACTIVE)
        .group_by(Student.id, Student.class_id)
        .subquery()
    )

    total_deposits = func.coalesce(func.sum(student_totals.c.deposits), 0).label("total_deposits")
    query = (
        select(
            SchoolClass.id.label("class_id"),
            SchoolClass.name.label("class_name"),
            total_deposits,
            func.count(student_totals.c.student_id).label("total_students"),
            func.coalesce(func.sum(student_totals.c.balance), 0).label("total_balance"),
        )
        .outerjoin(student_totals, student_totals.c.class_id == SchoolClass.id)
        .group_by(SchoolClass.id, SchoolClass.name)
        .order_by(total_deposits.desc(), SchoolClass.id)
    )
    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    leaderboard = []
    for row in result:
        average_balance = Decimal("0")
        if row.total_students > 0:
            average_balance = (Decimal(row.total_balance) / row.total_students).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
        leaderboard.append({
            "class_id": row.class_id,
            "class_name": row.class_name,
            "total_deposits": Decimal(row.total_deposits),
            "total_students": row.total_students,
            "average_balance": average_balance,
        })

    return leaderboard
