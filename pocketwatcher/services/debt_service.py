"""
Debt service for lending/borrowing records and settlement.
"""
import logging
from typing import Dict, List
from sqlalchemy.orm import Session
from pocketwatcher.models.debt import Debt, DebtStatus, DebtType
from pocketwatcher.services.ownership import get_owned_record

logger = logging.getLogger(__name__)


def create_debt(
    user_id: int,
    friend_name: str,
    amount: float,
    debt_type: DebtType,
    db: Session
) -> Debt:
    """Create a pending debt owned by user_id."""
    debt = Debt(
        user_id=user_id,
        friend_name=friend_name,
        amount=amount,
        type=debt_type,
        status=DebtStatus.PENDING
    )
    db.add(debt)
    db.commit()
    db.refresh(debt)
    return debt


def list_pending_debts(user_id: int, db: Session) -> List[Debt]:
    """Return the user's pending debts, newest first. Settled debts are kept but hidden."""
    return db.query(Debt).filter(
        Debt.user_id == user_id,
        Debt.status == DebtStatus.PENDING
    ).order_by(Debt.date.desc(), Debt.id.desc()).all()


def get_debt(debt_id: int, user_id: int, db: Session) -> Debt:
    return get_owned_record(Debt, debt_id, user_id, db, label="Debt record")


def settle_debt(debt_id: int, user_id: int, db: Session) -> Debt:
    """
    Mark a debt as settled.

    Settling an already settled debt writes the same status again; there is
    no way back to Pending.
    """
    debt = get_owned_record(Debt, debt_id, user_id, db, label="Debt record")
    db.query(Debt).filter(Debt.id == debt.id).update(
        {Debt.status: DebtStatus.SETTLED}, synchronize_session="fetch"
    )
    db.commit()
    db.refresh(debt)
    logger.info(f"User {user_id} settled debt {debt_id}")
    return debt


def delete_debt(debt_id: int, user_id: int, db: Session) -> None:
    """Delete a debt after checking ownership."""
    debt = get_owned_record(Debt, debt_id, user_id, db, label="Debt record")
    db.delete(debt)
    db.commit()
    logger.info(f"User {user_id} deleted debt {debt_id}")


def summarize_balances(user_id: int, db: Session) -> Dict:
    """Total what the user is owed and owes across pending debts."""
    debts = list_pending_debts(user_id, db)

    to_receive = sum(d.amount for d in debts if d.type == DebtType.TO_RECEIVE)
    to_pay = sum(d.amount for d in debts if d.type == DebtType.TO_PAY)

    return {
        "to_receive": to_receive,
        "to_pay": to_pay,
        "net": to_receive - to_pay,
        "pending_count": len(debts)
    }
