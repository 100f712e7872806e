"""
Expense ledger routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from pocketwatcher.db.session import get_db
from pocketwatcher.schemas.common import MessageResponse
from pocketwatcher.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseSummaryResponse
from pocketwatcher.api.dependencies import get_current_user_id, record_id_path
from pocketwatcher.core.utils import format_message
from pocketwatcher.services import expense_service

router = APIRouter(tags=["expenses"])


@router.post("/add-expense", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def add_expense(
    expense_data: ExpenseCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new expense."""
    return expense_service.create_expense(
        user_id=current_user_id,
        title=expense_data.title,
        amount=expense_data.amount,
        category=expense_data.category,
        db=db
    )


@router.get("/all-expenses", response_model=List[ExpenseResponse])
def get_all_expenses(
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get the caller's expenses, newest first."""
    return expense_service.list_expenses(current_user_id, db)


@router.get("/expense-summary", response_model=ExpenseSummaryResponse)
def get_expense_summary(
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get category-wise totals of the caller's expenses."""
    return expense_service.summarize_by_category(current_user_id, db)


@router.get("/expense/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: int = record_id_path("Expense id"),
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get a single expense."""
    return expense_service.get_expense(expense_id, current_user_id, db)


@router.delete("/delete-expense/{expense_id}", response_model=MessageResponse)
def delete_expense(
    expense_id: int = record_id_path("Expense id"),
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    expense_service.delete_expense(expense_id, current_user_id, db)
    return format_message("Expense deleted!", success=True)
