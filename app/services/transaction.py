"""Transaction service - savings ledger, balances and transaction reports."""

import logging
from decimal import Decimal

from sqlalchemy import Select, case, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.school_class import SchoolClass
from app.models.student import Student
from app.models.transaction import Transaction, TransactionType
from app.schemas.transaction import TransactionCreate, TransactionFilter, TransactionUpdate
from app.services.student import require_student

logger = logging.getLogger(__name__)


# ============== Ledger expressions ==============


def deposit_amount():
    """Per-row deposit contribution: the amount for deposits, 0 otherwise."""
    return case(
        (Transaction.type == TransactionType.DEPOSIT, Transaction.amount),
        else_=0,
    )


def signed_amount():
    """Per-row balance contribution: +amount for deposits, -amount for withdrawals."""
    return case(
        (Transaction.type == TransactionType.DEPOSIT, Transaction.amount),
        (Transaction.type == TransactionType.WITHDRAWAL, -Transaction.amount),
        else_=0,
    )


def _apply_filter(query: Select, filters: TransactionFilter | None) -> Select:
    """Narrow a query over Transaction (already joined to Student) by the given filters."""
    if filters is None:
        return query
    if filters.student_id is not None:
        query = query.where(Transaction.student_id == filters.student_id)
    if filters.class_id is not None:
        query = query.where(Student.class_id == filters.class_id)
    if filters.start_date is not None:
        query = query.where(Transaction.date >= filters.start_date)
    if filters.end_date is not None:
        query = query.where(Transaction.date <= filters.end_date)
    if filters.type is not None:
        query = query.where(Transaction.type == filters.type)
    return query


# ============== CRUD ==============


async def get_transaction_by_id(db: AsyncSession, transaction_id: int) -> Transaction | None:
    """Get transaction by ID."""
    result = await db.execute(select(Transaction).where(Transaction.id == transaction_id))
    return result.scalar_one_or_none()


async def get_transactions(
    db: AsyncSession,
    filters: TransactionFilter | None = None,
) -> list[Transaction]:
    """Get transactions, optionally filtered. No filter returns the whole ledger."""
    query = select(Transaction).join(Student, Transaction.student_id == Student.id)
    query = _apply_filter(query, filters)
    result = await db.execute(query.order_by(Transaction.date, Transaction.id))
    return list(result.scalars().all())


async def get_transactions_by_student(db: AsyncSession, student_id: int) -> list[Transaction]:
    """Get all transactions of a student. Unknown students have none."""
    return await get_transactions(db, TransactionFilter(student_id=student_id))


async def get_transactions_by_class(db: AsyncSession, class_id: int) -> list[Transaction]:
    """Get all transactions of students in a class. Unknown classes have none."""
    return await get_transactions(db, TransactionFilter(class_id=class_id))


async def get_transactions_by_teacher(db: AsyncSession, teacher_id: int) -> list[Transaction]:
    """
    Get all transactions of students in the teacher's homeroom classes.

    A teacher without a homeroom class, or an unknown teacher, yields an empty list.
    """
    query = (
        select(Transaction)
        .join(Student, Transaction.student_id == Student.id)
        .join(SchoolClass, Student.class_id == SchoolClass.id)
        .where(SchoolClass.homeroom_teacher_id == teacher_id)
        .order_by(Transaction.date, Transaction.id)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def create_transaction(db: AsyncSession, transaction_data: TransactionCreate) -> Transaction:
    """Record a deposit or withdrawal for an existing student."""
    await require_student(db, transaction_data.student_id)

    transaction = Transaction(
        student_id=transaction_data.student_id,
        date=transaction_data.date,
        type=transaction_data.type,
        amount=transaction_data.amount,
        notes=transaction_data.notes,
    )
    db.add(transaction)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning(
            "Rejected transaction for student %s: %s", transaction_data.student_id, exc.orig
        )
        raise ConflictError(
            f"Student with id {transaction_data.student_id} no longer exists"
        ) from exc
    await db.refresh(transaction)

    logger.info(
        "Created %s %s of %s for student %s",
        transaction.type,
        transaction.id,
        transaction.amount,
        transaction.student_id,
    )
    return transaction


async def update_transaction(
    db: AsyncSession,
    transaction_id: int,
    transaction_data: TransactionUpdate,
) -> Transaction:
    """Update a transaction. Moving it to another student re-validates that student."""
    transaction = await get_transaction_by_id(db, transaction_id)
    if transaction is None:
        raise NotFoundError("Transaction", transaction_id)

    update_data = transaction_data.model_dump(exclude_unset=True)
    if "student_id" in update_data and update_data["student_id"] != transaction.student_id:
        await require_student(db, update_data["student_id"])

    for field, value in update_data.items():
        setattr(transaction, field, value)
    transaction.touch()

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected update of transaction %s: %s", transaction_id, exc.orig)
        raise ConflictError(
            f"Transaction with id {transaction_id} references a student that no longer exists"
        ) from exc
    await db.refresh(transaction)

    logger.info("Updated transaction %s", transaction.id)
    return transaction


async def delete_transaction(db: AsyncSession, transaction_id: int) -> None:
    """Delete a transaction."""
    transaction = await get_transaction_by_id(db, transaction_id)
    if transaction is None:
        raise NotFoundError("Transaction", transaction_id)

    await db.delete(transaction)
    await db.commit()

    logger.info("Deleted transaction %s", transaction_id)


# ============== Balances and reports ==============


async def get_student_balance(db: AsyncSession, student_id: int) -> Decimal:
    """
    Net savings balance of a student: sum of deposits minus sum of withdrawals.

    Returns 0 for a student without transactions. Raises NotFoundError for an
    unknown student.
    """
    await require_student(db, student_id)

    query = select(
        func.coalesce(func.sum(signed_amount()), 0)
    ).where(Transaction.student_id == student_id)
    result = await db.execute(query)
    return Decimal(result.scalar() or 0)


async def get_transaction_report(
    db: AsyncSession,
    filters: TransactionFilter | None = None,
) -> list[dict]:
    """Transactions enriched with student and class names, optionally filtered."""
    query = (
        select(
            Transaction.id.label("transaction_id"),
            Transaction.date,
            Transaction.type,
            Transaction.amount,
            Transaction.notes,
            Student.name.label("student_name"),
            SchoolClass.name.label("class_name"),
        )
        .join(Student, Transaction.student_id == Student.id)
        .join(SchoolClass, Student.class_id == SchoolClass.id)
    )
    query = _apply_filter(query, filters).order_by(Transaction.date, Transaction.id)

    result = await db.execute(query)
    return [row._asdict() for row in result]
