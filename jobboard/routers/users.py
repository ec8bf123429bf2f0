import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.core.query import PageParams, UserFilter
from jobboard.database import get_db
from jobboard.dependencies import get_current_admin
from jobboard.models.enums import UserRole
from jobboard.models.user import User
from jobboard.repos.user_repo import get_paginated, get_stats
from jobboard.serializers import user_to_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
def list_users(
    page: str | None = None,
    limit: str | None = None,
    role: UserRole | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    """List users newest first, optionally by role. Admin only."""
    page_params = PageParams.from_query(page, limit)
    try:
        users, total = get_paginated(db, UserFilter(role=role.value if role else None), page_params)
    except Exception as e:
        logger.exception("User listing failed for admin=%s: %s", user.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e
    return {
        "users": [user_to_response(u) for u in users],
        "pagination": page_params.envelope(total),
    }


@router.get("/stats")
def user_stats(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    """Return user counts by role. Admin only."""
    try:
        return get_stats(db)
    except Exception as e:
        logger.exception("User stats failed for admin=%s: %s", user.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e
