# app/utils/errors.py
"""
Domain error taxonomy shared by services and the API layer.

Services raise these; app.main maps each class to an HTTP status.
SQLAlchemy failures are translated by `store_errors` so callers never
see driver-specific exception types.
"""

from contextlib import contextmanager

from sqlalchemy.exc import DataError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from app.utils.logger import get_logger

logger = get_logger(__name__)


class FleetError(Exception):
    """Base class for every error surfaced to API clients."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidInput(FleetError):
    status_code = 422


class NotFound(FleetError):
    status_code = 404


class ConstraintViolation(FleetError):
    status_code = 409


class StoreUnavailable(FleetError):
    status_code = 503


@contextmanager
def store_errors(db: Session, action: str):
    """
    Wrap a unit of store work. Rolls back and re-raises SQLAlchemy failures
    as InvalidInput / ConstraintViolation / StoreUnavailable. Domain errors pass through
    after rollback so no partial write is left in the session.
    """
    try:
        yield
    except DataError as e:
        db.rollback()
        logger.error(f"{action} failed, value rejected by store: {e.orig}")
        raise InvalidInput(f"{action} has a value the store cannot hold") from e
    except IntegrityError as e:
        db.rollback()
        logger.error(f"{action} failed — integrity error: {e.orig}")
        raise ConstraintViolation(f"{action} violates a store constraint") from e
    except (OperationalError, InterfaceError, PoolTimeoutError) as e:
        db.rollback()
        logger.error(f"{action} failed — store unavailable: {e}", exc_info=True)
        raise StoreUnavailable(f"{action} failed: relational store unavailable") from e
    except FleetError:
        db.rollback()
        raise
