"""
Business rules for submitting and reviewing applications.

Apply runs an explicit existence check so the common duplicate case gets a
clean error, but the unique (job, applicant) constraint is what actually
guarantees one application per pair. An IntegrityError on insert means a
concurrent request won the race and is reported as the same duplicate error.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.models.application import Application
from jobboard.models.enums import ApplicationStatus, JobStatus
from jobboard.repos import application_repo, job_repo

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for application business-rule failures."""


class JobNotAvailable(ApplicationError):
    def __init__(self, job_id: str):
        super().__init__(f"Job {job_id} not found or not active")
        self.job_id = job_id


class DuplicateApplication(ApplicationError):
    def __init__(self, job_id: str, applicant_id: str):
        super().__init__(f"User {applicant_id} already applied for job {job_id}")
        self.job_id = job_id
        self.applicant_id = applicant_id


class ApplicationNotFound(ApplicationError):
    def __init__(self, application_id: str):
        super().__init__(f"Application {application_id} not found")
        self.application_id = application_id


def _is_open(job) -> bool:
    return job is not None and job.status == JobStatus.ACTIVE.value


def apply(
    db: Session,
    job_id: str,
    applicant_id: str,
    resume: str,
    cover_letter: str,
) -> Application:
    if not _is_open(job_repo.get_by_id(db, job_id)):
        raise JobNotAvailable(job_id)

    if application_repo.get_existing(db, job_id, applicant_id):
        raise DuplicateApplication(job_id, applicant_id)

    try:
        application = application_repo.create(db, job_id, applicant_id, resume, cover_letter)
    except IntegrityError as e:
        db.rollback()
        # A job deleted since the check above fails the foreign key rather than the unique pair
        if not _is_open(job_repo.get_by_id(db, job_id)):
            logger.info("Application insert failed, job no longer available: job=%s user=%s", job_id, applicant_id)
            raise JobNotAvailable(job_id) from e
        logger.info("Duplicate application rejected by constraint: job=%s user=%s", job_id, applicant_id)
        raise DuplicateApplication(job_id, applicant_id) from e

    logger.info("Application submitted: id=%s job=%s user=%s", application.id, job_id, applicant_id)
    return application


def update_status(
    db: Session,
    application_id: str,
    status: ApplicationStatus | str,
    notes: str | None = None,
) -> Application:
    """Set status (and notes when given). Any status may follow any other."""
    status_value = ApplicationStatus(status).value
    application = application_repo.update_status(db, application_id, status_value, notes)
    if not application:
        raise ApplicationNotFound(application_id)
    logger.info("Application %s status -> %s", application_id, status_value)
    return application
