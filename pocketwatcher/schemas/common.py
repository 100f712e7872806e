"""
Shared request and response schemas.
"""
from pydantic import BaseModel, ConfigDict, computed_field
from typing import Optional


def reject_boolean_amount(value):
    """JSON true/false must not coerce to 1.0/0.0."""
    if isinstance(value, bool):
        raise ValueError("amount must be a number")
    return value


class MessageResponse(BaseModel):
    """Schema for confirmation responses."""
    success: Optional[bool] = None
    message: str


class RecordResponse(BaseModel):
    """Base for ledger records. `_id` mirrors `id` for the mobile client."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int

    @computed_field(alias="_id")
    @property
    def record_id(self) -> int:
        return self.id
