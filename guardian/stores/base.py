# guardian/stores/base.py
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from guardian.services.errors import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_call(db: Session, operation: str):
    """Run a store operation, turning driver/ORM failures into StoreUnavailable.

    The session is rolled back so a failed write never leaves half a
    record behind.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"STORE error op={operation} err={exc.__class__.__name__}", exc_info=True)
        raise StoreUnavailable(f"{operation} failed: {exc}") from exc


class SessionStore:
    """Common base: every store is bound to one explicitly passed session."""

    def __init__(self, db: Session):
        self.db = db
