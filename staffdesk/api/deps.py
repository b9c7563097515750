"""FastAPI dependency injection — database sessions and service factories."""
from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from staffdesk.db.session import get_session_factory
from staffdesk.staff.service import StaffService


def get_db() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = get_session_factory()
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_staff_service(db: Session = Depends(get_db)) -> StaffService:
    """Return a StaffService bound to the current DB session."""
    return StaffService(db)
