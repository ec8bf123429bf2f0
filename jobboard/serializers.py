"""JSON shapes for API responses, including populated references."""

from datetime import datetime

from jobboard.models.application import Application
from jobboard.models.job import Job
from jobboard.models.user import User

# Populated projections, per endpoint
POSTED_BY_FIELDS = ("name",)
APPLICANT_CONTACT_FIELDS = ("name", "email")
APPLICANT_REVIEW_FIELDS = ("name", "email", "phone", "location", "skills", "experience")
JOB_BRIEF_FIELDS = ("title", "company")
JOB_LISTING_FIELDS = ("title", "company", "location", "type")


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def user_to_response(u: User) -> dict:
    """Sanitized user profile. Never includes the password hash."""
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "role": u.role,
        "phone": u.phone,
        "location": u.location,
        "skills": list(u.skills or []),
        "experience": u.experience,
        "createdAt": _iso(u.created_at),
    }


def user_summary(u: User | None, fields: tuple[str, ...]) -> dict | None:
    if u is None:
        return None
    profile = user_to_response(u)
    return {"id": u.id, **{f: profile[f] for f in fields}}


def job_summary(j: Job | None, fields: tuple[str, ...]) -> dict | None:
    if j is None:
        return None
    return {"id": j.id, **{f: getattr(j, f) for f in fields}}


def job_to_response(j: Job) -> dict:
    return {
        "id": j.id,
        "title": j.title,
        "company": j.company,
        "description": j.description,
        "requirements": list(j.requirements or []),
        "location": j.location,
        "type": j.type,
        "salary": {
            "min": j.salary_min,
            "max": j.salary_max,
            "currency": j.salary_currency,
        },
        "skills": list(j.skills or []),
        "experience": j.experience,
        "status": j.status,
        "postedBy": user_summary(j.posted_by, POSTED_BY_FIELDS),
        "applicationDeadline": _iso(j.application_deadline),
        "createdAt": _iso(j.created_at),
        "updatedAt": _iso(j.updated_at),
    }


def application_to_response(
    a: Application,
    *,
    job_fields: tuple[str, ...] | None = JOB_BRIEF_FIELDS,
    applicant_fields: tuple[str, ...] | None = APPLICANT_CONTACT_FIELDS,
) -> dict:
    """Application with its job and applicant populated. Pass None to leave a reference as a bare id."""
    return {
        "id": a.id,
        "job": job_summary(a.job, job_fields) if job_fields is not None else a.job_id,
        "applicant": (
            user_summary(a.applicant, applicant_fields)
            if applicant_fields is not None
            else a.applicant_id
        ),
        "resume": a.resume,
        "coverLetter": a.cover_letter,
        "status": a.status,
        "notes": a.notes,
        "createdAt": _iso(a.created_at),
        "updatedAt": _iso(a.updated_at),
    }
