from pydantic import field_validator

from jobboard.models.enums import ApplicationStatus
from jobboard.schemas.common import CamelModel, trimmed


class ApplicationCreate(CamelModel):
    job_id: str
    resume: str
    cover_letter: str

    @field_validator("job_id")
    @classmethod
    def job_id_required(cls, v: str) -> str:
        return trimmed(v, 1, "Invalid job ID")

    @field_validator("resume")
    @classmethod
    def resume_length(cls, v: str) -> str:
        return trimmed(v, 10, "Resume must be at least 10 characters")

    @field_validator("cover_letter")
    @classmethod
    def cover_letter_length(cls, v: str) -> str:
        return trimmed(v, 10, "Cover letter must be at least 10 characters")


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    notes: str | None = None

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None
