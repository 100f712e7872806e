"""
Debt model for money lent to or borrowed from friends.
"""
from datetime import datetime
from sqlalchemy import Column, String, Float, DateTime, Enum as SQLEnum, ForeignKey, Integer
from sqlalchemy.orm import relationship
from pocketwatcher.db.base import BaseModel
import enum


class DebtType(str, enum.Enum):
    """Direction of a debt relative to its owner."""
    TO_RECEIVE = "To Receive"
    TO_PAY = "To Pay"


class DebtStatus(str, enum.Enum):
    """Debt status enumeration. Settled is terminal."""
    PENDING = "Pending"
    SETTLED = "Settled"


class Debt(BaseModel):
    """Debt model tracking a balance with a counterpart."""
    __tablename__ = "debts"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    friend_name = Column(String(100), nullable=False)
    amount = Column(Float, nullable=False)
    type = Column(SQLEnum(DebtType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    status = Column(
        SQLEnum(DebtStatus, values_callable=lambda e: [m.value for m in e]),
        default=DebtStatus.PENDING,
        nullable=False,
        index=True
    )
    date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="debts")
