"""
Credential service for registering and authenticating users.
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from pocketwatcher.core.errors import DuplicateIdentity, InvalidCredentials
from pocketwatcher.core.security import get_password_hash, verify_password
from pocketwatcher.models.user import User

logger = logging.getLogger(__name__)


def find_by_email(email: str, db: Session) -> Optional[User]:
    """Look up a user by exact email match."""
    return db.query(User).filter(User.email == email).first()


def register(name: str, email: str, password: str, db: Session) -> User:
    """
    Create a new user.

    The duplicate check runs before hashing so a taken email costs no
    bcrypt work. The unique constraint still catches a concurrent insert.
    """
    if find_by_email(email, db):
        raise DuplicateIdentity()

    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(password)
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateIdentity()
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


def verify_secret(user: User, candidate: str) -> bool:
    """Check a candidate password against the stored bcrypt hash."""
    return verify_password(candidate, user.hashed_password)


def authenticate(email: str, password: str, db: Session) -> User:
    """Return the user for valid credentials, otherwise raise InvalidCredentials."""
    user = find_by_email(email, db)
    if not user or not verify_secret(user, password):
        logger.warning("Failed login attempt")
        raise InvalidCredentials()
    return user
