from datetime import datetime

from pydantic import model_validator, field_validator

from jobboard.models.enums import Currency, ExperienceLevel, JobStatus, JobType
from jobboard.schemas.common import CamelModel, clean_list, trimmed


class Salary(CamelModel):
    min: float | None = None
    max: float | None = None
    currency: Currency = Currency.USD

    @model_validator(mode="after")
    def range_ordered(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("Salary min cannot exceed max")
        return self


class _JobFields(CamelModel):
    @field_validator("title", check_fields=False)
    @classmethod
    def title_length(cls, v: str | None) -> str | None:
        return trimmed(v, 3, "Title must be at least 3 characters")

    @field_validator("company", check_fields=False)
    @classmethod
    def company_length(cls, v: str | None) -> str | None:
        return trimmed(v, 2, "Company must be at least 2 characters")

    @field_validator("description", check_fields=False)
    @classmethod
    def description_length(cls, v: str | None) -> str | None:
        return trimmed(v, 10, "Description must be at least 10 characters")

    @field_validator("location", check_fields=False)
    @classmethod
    def location_required(cls, v: str | None) -> str | None:
        return trimmed(v, 2, "Location is required")

    @field_validator("requirements", "skills", check_fields=False)
    @classmethod
    def strip_items(cls, v: list[str] | None) -> list[str] | None:
        return None if v is None else clean_list(v)

    def to_fields(self) -> dict:
        """Flatten to Job column values. Only fields the caller sent are included."""
        data = self.model_dump(exclude_unset=True, by_alias=False, mode="python")
        salary = data.pop("salary", None)
        if "salary" in self.model_fields_set:
            salary = salary or {}
            data["salary_min"] = salary.get("min")
            data["salary_max"] = salary.get("max")
            currency = salary.get("currency") or Currency.USD
            data["salary_currency"] = Currency(currency).value
        for key in ("type", "experience", "status"):
            if data.get(key) is not None:
                data[key] = data[key].value
        return data


class JobCreate(_JobFields):
    title: str
    company: str
    description: str
    requirements: list[str] = []
    location: str
    type: JobType
    salary: Salary | None = None
    skills: list[str] = []
    experience: ExperienceLevel
    status: JobStatus = JobStatus.ACTIVE
    application_deadline: datetime | None = None

    def to_fields(self) -> dict:
        data = super().to_fields()
        data.setdefault("status", JobStatus.ACTIVE.value)
        data.setdefault("requirements", [])
        data.setdefault("skills", [])
        data.setdefault("salary_currency", Currency.USD.value)
        return data


class JobUpdate(_JobFields):
    title: str | None = None
    company: str | None = None
    description: str | None = None
    requirements: list[str] | None = None
    location: str | None = None
    type: JobType | None = None
    salary: Salary | None = None
    skills: list[str] | None = None
    experience: ExperienceLevel | None = None
    status: JobStatus | None = None
    application_deadline: datetime | None = None

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for name in ("title", "company", "description", "location", "type", "experience", "status"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self
