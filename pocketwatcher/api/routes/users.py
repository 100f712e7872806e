"""
User profile routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pocketwatcher.db.session import get_db
from pocketwatcher.schemas.user import UserResponse
from pocketwatcher.models.user import User
from pocketwatcher.core.errors import NotFound
from pocketwatcher.api.dependencies import get_current_user_id

router = APIRouter(tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get current user information."""
    user = db.query(User).filter(User.id == current_user_id).first()
    if not user:
        raise NotFound("User not found")
    return user
