import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobboard.core.query import ApplicationFilter, PageParams
from jobboard.database import get_db
from jobboard.dependencies import get_current_admin, get_current_user
from jobboard.models.enums import ApplicationStatus
from jobboard.models.user import User
from jobboard.repos import application_repo
from jobboard.schemas.application import ApplicationCreate, ApplicationStatusUpdate
from jobboard.serializers import (
    APPLICANT_REVIEW_FIELDS,
    JOB_LISTING_FIELDS,
    application_to_response,
)
from jobboard.services.application_service import (
    ApplicationNotFound,
    DuplicateApplication,
    JobNotAvailable,
    apply,
    update_status,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/applications", tags=["applications"])


def _server_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")


@router.post("", status_code=status.HTTP_201_CREATED)
def submit_application(
    body: ApplicationCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Apply for an active job. One application per job and user."""
    try:
        application = apply(db, body.job_id, user.id, body.resume, body.cover_letter)
        return application_to_response(application)
    except JobNotAvailable as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found or not active") from e
    except DuplicateApplication as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You have already applied for this job",
        ) from e
    except Exception as e:
        logger.exception("Apply failed for user=%s job=%s: %s", user.id, body.job_id, e)
        raise _server_error() from e


@router.get("/my-applications")
def my_applications(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        applications = application_repo.get_for_applicant(db, user.id)
    except Exception as e:
        logger.exception("Listing applications failed for user=%s: %s", user.id, e)
        raise _server_error() from e
    return [
        application_to_response(a, job_fields=JOB_LISTING_FIELDS, applicant_fields=None)
        for a in applications
    ]


@router.get("")
def list_applications(
    page: str | None = None,
    limit: str | None = None,
    application_status: ApplicationStatus | None = Query(None, alias="status"),
    job_id: str | None = Query(None, alias="jobId"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    """All applications, paginated, with reviewer context on each applicant. Admin only."""
    page_params = PageParams.from_query(page, limit)
    application_filter = ApplicationFilter(
        status=application_status.value if application_status else None,
        job_id=job_id or None,
    )
    try:
        applications, total = application_repo.get_paginated(db, application_filter, page_params)
    except Exception as e:
        logger.exception("Admin application listing failed for admin=%s: %s", user.email, e)
        raise _server_error() from e
    return {
        "applications": [
            application_to_response(a, applicant_fields=APPLICANT_REVIEW_FIELDS)
            for a in applications
        ],
        "pagination": page_params.envelope(total),
    }


@router.get("/job/{job_id}")
def applications_for_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    try:
        applications = application_repo.get_for_job(db, job_id)
    except Exception as e:
        logger.exception("Listing applications failed for job=%s: %s", job_id, e)
        raise _server_error() from e
    return [
        application_to_response(a, job_fields=None, applicant_fields=APPLICANT_REVIEW_FIELDS)
        for a in applications
    ]


@router.put("/{application_id}/status")
def change_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    try:
        application = update_status(db, application_id, body.status, body.notes)
        return application_to_response(application)
    except ApplicationNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found") from e
    except Exception as e:
        logger.exception("Status update failed for application=%s: %s", application_id, e)
        raise _server_error() from e
