"""Leaderboard schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class StudentLeaderboardEntry(BaseModel):
    """Savings activity of a single active student."""

    student_id: int
    student_name: str
    class_name: str
    total_deposits: Decimal
    transaction_count: int
    current_balance: Decimal

    model_config = ConfigDict(from_attributes=True)


class ClassLeaderboardEntry(BaseModel):
    """Savings activity of a class, over its active students."""

    class_id: int
    class_name: str
    total_deposits: Decimal
    total_students: int = Field(description="Active students in the class")
    average_balance: Decimal = Field(description="Mean net balance per active student")

    model_config = ConfigDict(from_attributes=True)
