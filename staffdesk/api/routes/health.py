"""GET /health — liveness plus a round trip to the staff database."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from staffdesk.api.deps import get_db
from staffdesk.core.settings import get_settings
from staffdesk.db.models import Staff

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", summary="Service and database health")
def health_check(db: Session = Depends(get_db)) -> dict:
    """Report ``ok`` with the staff record count, or ``degraded`` when the
    database cannot be queried.  Always answers 200."""
    settings = get_settings()
    body: dict = {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
    try:
        db.execute(text("SELECT 1"))
        body["database"] = "ok"
        body["staff_records"] = db.execute(select(func.count()).select_from(Staff)).scalar_one()
    except SQLAlchemyError as exc:
        logger.warning("Health check could not reach the database: %s", type(exc).__name__)
        body["status"] = "degraded"
        body["database"] = "unavailable"
    return body
