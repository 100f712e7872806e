"""
Pydantic schemas for Debt entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from pocketwatcher.models.debt import DebtStatus, DebtType
from pocketwatcher.schemas.common import RecordResponse, reject_boolean_amount


class DebtCreate(BaseModel):
    """Schema for debt creation."""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    friend_name: str = Field(..., alias="friendName", min_length=1, max_length=100)
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    type: DebtType

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v):
        return reject_boolean_amount(v)


class DebtResponse(RecordResponse):
    """Schema for debt response."""
    friend_name: str = Field(..., serialization_alias="friendName")
    amount: float
    type: DebtType
    status: DebtStatus
    date: datetime


class DebtSummaryResponse(BaseModel):
    """Schema for pending balance totals."""
    to_receive: float
    to_pay: float
    net: float  # Positive when the owner is owed more than they owe
    pending_count: int
