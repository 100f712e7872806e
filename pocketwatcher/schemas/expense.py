"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from pocketwatcher.models.expense import ExpenseCategory
from pocketwatcher.schemas.common import RecordResponse, reject_boolean_amount


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    category: Optional[ExpenseCategory] = None  # None falls back to General

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v):
        return reject_boolean_amount(v)


class ExpenseResponse(RecordResponse):
    """Schema for expense response."""
    title: str
    amount: float
    category: str
    date: datetime


class CategoryExpenseItem(BaseModel):
    """Schema for category expense item in summary."""
    category: str
    total_amount: float
    expense_count: int
    percentage: float  # Percentage of total expenses (0-100)


class ExpenseSummaryResponse(BaseModel):
    """Schema for per-category expense breakdown."""
    total_expenses: float
    expense_count: int
    categories: List[CategoryExpenseItem]
