"""
Authentication routes for registration and login.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pocketwatcher.db.session import get_db
from pocketwatcher.schemas.user import UserCreate, UserLogin, AuthToken
from pocketwatcher.core.security import create_access_token
from pocketwatcher.services import credential_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthToken)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return a token."""
    user = credential_service.register(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        db=db
    )
    return AuthToken(authToken=create_access_token(user.id))


@router.post("/login", response_model=AuthToken)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get a token."""
    user = credential_service.authenticate(credentials.email, credentials.password, db)
    logger.info(f"User {user.id} logged in")
    return AuthToken(authToken=create_access_token(user.id))
