"""
Ownership checks shared by every ledger handler.
"""
import logging
from sqlalchemy.orm import Session
from pocketwatcher.core.errors import Forbidden, NotFound

logger = logging.getLogger(__name__)


def get_owned_record(model, record_id: int, owner_id: int, db: Session, label: str = "Record"):
    """
    Load a ledger record and check that it belongs to owner_id.

    Raises NotFound when no record has that id and Forbidden when it
    belongs to another user.
    """
    record = db.query(model).filter(model.id == record_id).first()
    if not record:
        raise NotFound(f"{label} not found")

    if record.user_id != owner_id:
        logger.warning(f"User {owner_id} denied access to {model.__tablename__} {record_id}")
        raise Forbidden()

    return record
