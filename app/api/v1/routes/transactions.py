"""Savings transaction routes."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.models.transaction import TransactionType
from app.schemas.transaction import (
    TransactionCreate,
    TransactionFilter,
    TransactionReportRow,
    TransactionResponse,
    TransactionUpdate,
)
from app.services import transaction as transaction_service

router = APIRouter(prefix="/transactions", tags=["Transactions"])


# ============== Helper Functions ==============


def transaction_filter(
    student_id: int | None = Query(None, description="Filter by student ID"),
    class_id: int | None = Query(None, description="Filter by the student's class ID"),
    start_date: date | None = Query(None, description="Earliest date (inclusive)"),
    end_date: date | None = Query(None, description="Latest date (inclusive)"),
    type: TransactionType | None = Query(None, description="Deposit or withdrawal"),
) -> TransactionFilter:
    """Collect optional transaction filters from the query string."""
    if start_date and end_date and end_date < start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end_date must not be before start_date",
        )
    return TransactionFilter(
        student_id=student_id,
        class_id=class_id,
        start_date=start_date,
        end_date=end_date,
        type=type,
    )


Filters = Annotated[TransactionFilter, Depends(transaction_filter)]


# ============== Endpoints ==============


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    db: Annotated[AsyncSession, Depends(get_db)],
    filters: Filters,
):
    """List transactions. Filters combine with AND; none returns everything."""
    return await transaction_service.get_transactions(db, filters)


@router.get("/report", response_model=list[TransactionReportRow])
async def get_transaction_report(
    db: Annotated[AsyncSession, Depends(get_db)],
    filters: Filters,
):
    """Transactions with the student's and class's names, same filters as the listing."""
    return await transaction_service.get_transaction_report(db, filters)


@router.get("/by-student/{student_id}", response_model=list[TransactionResponse])
async def list_transactions_by_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all transactions of a student."""
    return await transaction_service.get_transactions_by_student(db, student_id)


@router.get("/by-class/{class_id}", response_model=list[TransactionResponse])
async def list_transactions_by_class(
    class_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all transactions of students in a class."""
    return await transaction_service.get_transactions_by_class(db, class_id)


@router.get("/by-teacher/{teacher_id}", response_model=list[TransactionResponse])
async def list_transactions_by_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all transactions of students in the teacher's homeroom classes."""
    return await transaction_service.get_transactions_by_teacher(db, teacher_id)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Record a deposit or withdrawal."""
    return await transaction_service.create_transaction(db, transaction_data)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Get a transaction by ID."""
    transaction = await transaction_service.get_transaction_by_id(db, transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )
    return transaction


@router.patch("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update a transaction."""
    return await transaction_service.update_transaction(db, transaction_id, transaction_data)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a transaction."""
    await transaction_service.delete_transaction(db, transaction_id)
