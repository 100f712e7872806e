"""
Debt ledger routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from pocketwatcher.db.session import get_db
from pocketwatcher.schemas.common import MessageResponse
from pocketwatcher.schemas.debt import DebtCreate, DebtResponse, DebtSummaryResponse
from pocketwatcher.api.dependencies import get_current_user_id, record_id_path
from pocketwatcher.core.utils import format_message
from pocketwatcher.services import debt_service

router = APIRouter(tags=["debts"])


@router.post("/add-debt", response_model=DebtResponse, status_code=status.HTTP_201_CREATED)
def add_debt(
    debt_data: DebtCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new pending debt."""
    return debt_service.create_debt(
        user_id=current_user_id,
        friend_name=debt_data.friend_name,
        amount=debt_data.amount,
        debt_type=debt_data.type,
        db=db
    )


@router.get("/all-debts", response_model=List[DebtResponse])
def get_all_debts(
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get the caller's pending debts, newest first."""
    return debt_service.list_pending_debts(current_user_id, db)


@router.get("/debt-summary", response_model=DebtSummaryResponse)
def get_debt_summary(
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get totals to receive and to pay across pending debts."""
    return debt_service.summarize_balances(current_user_id, db)


@router.get("/debt/{debt_id}", response_model=DebtResponse)
def get_debt(
    debt_id: int = record_id_path("Debt id"),
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get a single debt, pending or settled."""
    return debt_service.get_debt(debt_id, current_user_id, db)


@router.put(
    "/settle-debt/{debt_id}",
    response_model=MessageResponse,
    response_model_exclude_none=True
)
def settle_debt(
    debt_id: int = record_id_path("Debt id"),
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Mark a debt as settled."""
    debt_service.settle_debt(debt_id, current_user_id, db)
    return format_message("Balance settled!")


@router.delete("/delete-debt/{debt_id}", response_model=MessageResponse)
def delete_debt(
    debt_id: int = record_id_path("Debt id"),
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a debt."""
    debt_service.delete_debt(debt_id, current_user_id, db)
    return format_message("Debt deleted!", success=True)
