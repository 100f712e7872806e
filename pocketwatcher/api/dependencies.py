"""
Shared API dependencies.
"""
from typing import Optional
from fastapi import Depends, Path
from fastapi.security import APIKeyHeader
from pocketwatcher.core.config import settings
from pocketwatcher.core.errors import AuthRequired
from pocketwatcher.core.security import decode_access_token

auth_token_header = APIKeyHeader(name=settings.AUTH_HEADER_NAME, auto_error=False)


def get_current_user_id(token: Optional[str] = Depends(auth_token_header)) -> int:
    """
    Resolve the caller's user id from the auth token header.

    Only the token is checked here. Record ownership is enforced by each
    handler.
    """
    if not token:
        raise AuthRequired()
    return decode_access_token(token)


# Largest id a signed 64-bit primary key can hold
MAX_RECORD_ID = 2 ** 63 - 1


def record_id_path(description: str):
    """Path parameter for a ledger record id, bounded to valid primary keys."""
    return Path(..., ge=1, le=MAX_RECORD_ID, description=description)
