from sqlalchemy.orm import Session, joinedload

from jobboard.core.query import ApplicationFilter, PageParams
from jobboard.core.security import generate_id
from jobboard.models.application import Application
from jobboard.models.enums import ApplicationStatus


def _with_refs(db: Session):
    return db.query(Application).options(
        joinedload(Application.job),
        joinedload(Application.applicant),
    )


def _newest_first(q):
    return q.order_by(Application.created_at.desc(), Application.id.desc())


def get_by_id(db: Session, application_id: str) -> Application | None:
    return _with_refs(db).filter(Application.id == application_id).first()


def get_existing(db: Session, job_id: str, applicant_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(
            Application.job_id == job_id,
            Application.applicant_id == applicant_id,
        )
        .first()
    )


def create(
    db: Session,
    job_id: str,
    applicant_id: str,
    resume: str,
    cover_letter: str,
) -> Application:
    """Insert a pending application. IntegrityError propagates on a duplicate (job, applicant)."""
    application = Application(
        id=generate_id(),
        job_id=job_id,
        applicant_id=applicant_id,
        resume=resume,
        cover_letter=cover_letter,
        status=ApplicationStatus.PENDING.value,
    )
    db.add(application)
    db.commit()
    return get_by_id(db, application.id)


def get_for_applicant(db: Session, applicant_id: str) -> list[Application]:
    q = _with_refs(db).filter(Application.applicant_id == applicant_id)
    return _newest_first(q).all()


def get_for_job(db: Session, job_id: str) -> list[Application]:
    q = _with_refs(db).filter(Application.job_id == job_id)
    return _newest_first(q).all()


def get_paginated(
    db: Session,
    application_filter: ApplicationFilter,
    page: PageParams,
) -> tuple[list[Application], int]:
    """List applications newest first. Returns (items, total)."""
    q = application_filter.apply(db.query(Application))
    total = q.count()
    items = (
        _newest_first(
            q.options(
                joinedload(Application.job),
                joinedload(Application.applicant),
            )
        )
        .offset(page.skip)
        .limit(page.limit)
        .all()
    )
    return items, total


def update_status(
    db: Session,
    application_id: str,
    status: str,
    notes: str | None = None,
) -> Application | None:
    application = get_by_id(db, application_id)
    if not application:
        return None
    application.status = status
    if notes is not None:
        application.notes = notes
    db.commit()
    return get_by_id(db, application_id)
