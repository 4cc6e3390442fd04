"""
Health check endpoint.

Public, so load balancers and monitoring can reach it without
a session.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bank_app.config import get_settings
from bank_app.models.base import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Report application health and database reachability.

    A failed database check degrades the status instead of
    failing the request.
    """
    settings = get_settings()
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.error("health check database query failed error=%s", e)
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "bank-app",
        "version": settings.APP_VERSION,
        "database": db_status,
    }
