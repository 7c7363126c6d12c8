"""
Achievement Tracker - API Dependencies
FastAPI dependencies shared by the v1 routers
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.core.database import get_db
from achievement_tracker.schemas.assessment import MAX_RECORD_ID
from achievement_tracker.services.errors import NotFoundError


def not_found(e: NotFoundError) -> HTTPException:
    """HTTP 404 naming the missing record."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(e),
    )


def conflict(e: IntegrityError) -> HTTPException:
    """HTTP 409 carrying the database's own constraint message."""
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=str(e.orig),
    )


# Type aliases for common dependencies
DbSession = Annotated[AsyncSession, Depends(get_db)]
StudentId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]
AchievementId = Annotated[int | None, Query(ge=1, le=MAX_RECORD_ID)]
