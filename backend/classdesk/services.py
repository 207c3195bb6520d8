"""Shared plumbing for the database-backed services."""
import logging
from typing import Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import NotFoundError, OperationFailedError, ValidationBlockedError

logger = logging.getLogger(__name__)

M = TypeVar("M")


class BaseService:
    def __init__(self, db: Session):
        self.db = db

    def get_or_raise(self, model: Type[M], record_id: str) -> M:
        """Load a row by primary key or raise NotFoundError."""
        record = self.db.get(model, record_id)
        if record is None:
            raise NotFoundError(model.__name__, record_id)
        return record

    def commit(self, action: str, conflict: Optional[tuple[str, str]] = None) -> None:
        """
        Commit the unit of work, rolling back and reporting a generic failure on error.

        When ``conflict`` is a ``(field, message)`` pair, a unique-constraint
        violation is reported as a ValidationBlockedError on that field instead.
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            if conflict is not None:
                raise ValidationBlockedError(*conflict) from e
            raise OperationFailedError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise OperationFailedError() from e
        logger.info(f"Committed: {action}")


def require_text(value, field: str) -> str:
    """Trimmed text, or ValidationBlockedError when blank."""
    text = (value or "").strip()
    if not text:
        raise ValidationBlockedError(field, f"{field.replace('_', ' ').capitalize()} is required")
    return text
