"""Models package - Import all models for SQLAlchemy registration."""
from pocketwatcher.models.user import User
from pocketwatcher.models.expense import Expense, ExpenseCategory
from pocketwatcher.models.debt import Debt, DebtType, DebtStatus

__all__ = [
    "User",
    "Expense",
    "ExpenseCategory",
    "Debt",
    "DebtType",
    "DebtStatus",
]
