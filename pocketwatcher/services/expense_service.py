"""
Expense service for expense-related business logic.
"""
import logging
from typing import Dict, List
from sqlalchemy.orm import Session
from pocketwatcher.models.expense import Expense, ExpenseCategory
from pocketwatcher.services.ownership import get_owned_record

logger = logging.getLogger(__name__)


def create_expense(
    user_id: int,
    title: str,
    amount: float,
    category: ExpenseCategory = None,
    db: Session = None
) -> Expense:
    """Create an expense owned by user_id."""
    expense = Expense(
        user_id=user_id,
        title=title,
        amount=amount,
        category=(category or ExpenseCategory.GENERAL).value
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


def list_expenses(user_id: int, db: Session) -> List[Expense]:
    """Return the user's expenses, newest first."""
    return db.query(Expense).filter(
        Expense.user_id == user_id
    ).order_by(Expense.date.desc(), Expense.id.desc()).all()


def get_expense(expense_id: int, user_id: int, db: Session) -> Expense:
    return get_owned_record(Expense, expense_id, user_id, db, label="Expense")


def delete_expense(expense_id: int, user_id: int, db: Session) -> None:
    """Delete an expense after checking ownership."""
    expense = get_owned_record(Expense, expense_id, user_id, db, label="Expense")
    db.delete(expense)
    db.commit()
    logger.info(f"User {user_id} deleted expense {expense_id}")


def summarize_by_category(user_id: int, db: Session) -> Dict:
    """Compute totals per category over the user's expenses."""
    expenses = list_expenses(user_id, db)

    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}
    for expense in expenses:
        category = expense.category or ExpenseCategory.GENERAL.value
        totals[category] = totals.get(category, 0.0) + expense.amount
        counts[category] = counts.get(category, 0) + 1

    total = sum(totals.values())
    categories = [
        {
            "category": category,
            "total_amount": amount,
            "expense_count": counts[category],
            "percentage": round(amount / total * 100, 2) if total else 0.0
        }
        for category, amount in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]

    return {
        "total_expenses": total,
        "expense_count": len(expenses),
        "categories": categories
    }
