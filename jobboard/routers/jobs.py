import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobboard.core.query import JobFilter, PageParams
from jobboard.database import get_db
from jobboard.dependencies import get_current_admin
from jobboard.models.enums import ExperienceLevel, JobStatus, JobType
from jobboard.models.user import User
from jobboard.repos import job_repo
from jobboard.schemas.job import JobCreate, JobUpdate
from jobboard.serializers import job_to_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def _job_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")


def _list_jobs(db: Session, job_filter: JobFilter, page: PageParams) -> dict:
    jobs, total = job_repo.get_paginated(db, job_filter, page)
    return {
        "jobs": [job_to_response(j) for j in jobs],
        "pagination": page.envelope(total),
    }


@router.get("")
def list_jobs(
    page: str | None = None,
    limit: str | None = None,
    location: str | None = None,
    job_type: JobType | None = Query(None, alias="type"),
    experience: ExperienceLevel | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
):
    """Public listing: active jobs only, newest first."""
    job_filter = JobFilter(
        active_only=True,
        location=location,
        type=job_type.value if job_type else None,
        experience=experience.value if experience else None,
        search=search,
    )
    try:
        return _list_jobs(db, job_filter, PageParams.from_query(page, limit))
    except Exception as e:
        logger.exception("Job listing failed: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e


@router.get("/admin/all")
def list_all_jobs(
    page: str | None = None,
    limit: str | None = None,
    job_status: JobStatus | None = Query(None, alias="status"),
    location: str | None = None,
    job_type: JobType | None = Query(None, alias="type"),
    experience: ExperienceLevel | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    """Admin listing: every status unless one is requested."""
    job_filter = JobFilter(
        active_only=False,
        status=job_status.value if job_status else None,
        location=location,
        type=job_type.value if job_type else None,
        experience=experience.value if experience else None,
        search=search,
    )
    try:
        return _list_jobs(db, job_filter, PageParams.from_query(page, limit))
    except Exception as e:
        logger.exception("Admin job listing failed for admin=%s: %s", user.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e


@router.get("/{job_id}")
def get_job(job_id: str, db: Session = Depends(get_db)):
    job = job_repo.get_by_id(db, job_id)
    if not job:
        raise _job_not_found()
    return job_to_response(job)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    """Create a job posted by the acting admin."""
    try:
        job = job_repo.create(db, user.id, body.to_fields())
        logger.info("Job created: id=%s title=%s by admin %s", job.id, job.title, user.email)
        return job_to_response(job)
    except Exception as e:
        logger.exception("Job create failed for admin=%s: %s", user.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e


@router.put("/{job_id}")
def update_job(
    job_id: str,
    body: JobUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    """Partial update. Any status may follow any other."""
    try:
        job = job_repo.update(db, job_id, body.to_fields())
        if not job:
            raise _job_not_found()
        logger.info("Job updated: id=%s by admin %s", job_id, user.email)
        return job_to_response(job)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Job update failed for job=%s: %s", job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e


@router.delete("/{job_id}")
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_admin),
):
    try:
        if not job_repo.delete(db, job_id):
            raise _job_not_found()
        logger.info("Job deleted: id=%s by admin %s", job_id, user.email)
        return {"message": "Job deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Job delete failed for job=%s: %s", job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e
