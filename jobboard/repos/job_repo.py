import logging

from sqlalchemy.orm import Session, joinedload

from jobboard.core.query import JobFilter, PageParams
from jobboard.core.security import generate_id
from jobboard.models.application import Application
from jobboard.models.job import Job

logger = logging.getLogger(__name__)

# Columns a caller may set on create / update
JOB_FIELDS = (
    "title",
    "company",
    "description",
    "requirements",
    "location",
    "type",
    "salary_min",
    "salary_max",
    "salary_currency",
    "skills",
    "experience",
    "status",
    "application_deadline",
)


def get_by_id(db: Session, job_id: str) -> Job | None:
    return (
        db.query(Job)
        .options(joinedload(Job.posted_by))
        .filter(Job.id == job_id)
        .first()
    )


def get_paginated(
    db: Session,
    job_filter: JobFilter,
    page: PageParams,
) -> tuple[list[Job], int]:
    """List jobs matching the filter, newest first. Returns (items, total)."""
    q = job_filter.apply(db.query(Job))
    total = q.count()
    items = (
        q.options(joinedload(Job.posted_by))
        .order_by(Job.created_at.desc(), Job.id.desc())
        .offset(page.skip)
        .limit(page.limit)
        .all()
    )
    return items, total


def create(db: Session, posted_by_id: str, fields: dict) -> Job:
    job = Job(
        id=generate_id(),
        posted_by_id=posted_by_id,
        **{k: v for k, v in fields.items() if k in JOB_FIELDS},
    )
    db.add(job)
    db.commit()
    return get_by_id(db, job.id)


def update(db: Session, job_id: str, fields: dict) -> Job | None:
    job = get_by_id(db, job_id)
    if not job:
        return None
    for key, value in fields.items():
        if key in JOB_FIELDS:
            setattr(job, key, value)
    db.commit()
    db.refresh(job)
    return job


def delete(db: Session, job_id: str) -> bool:
    job = get_by_id(db, job_id)
    if not job:
        return False
    # Applications reference the job; remove them in the same transaction.
    removed = (
        db.query(Application)
        .filter(Application.job_id == job_id)
        .delete(synchronize_session=False)
    )
    db.delete(job)
    db.commit()
    if removed:
        logger.info("Deleted %d applications together with job %s", removed, job_id)
    return True
