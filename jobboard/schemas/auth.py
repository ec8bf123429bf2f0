from pydantic import EmailStr, field_validator

from jobboard.models.enums import ExperienceLevel, UserRole
from jobboard.schemas.common import CamelModel, clean_list, trimmed


class UserRegister(CamelModel):
    name: str
    email: EmailStr
    password: str
    role: UserRole = UserRole.JOB_SEEKER
    phone: str | None = None
    location: str | None = None
    skills: list[str] = []
    experience: ExperienceLevel | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return trimmed(v, 2, "Name must be at least 2 characters")

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, v: list[str]) -> list[str]:
        return clean_list(v)


class UserLogin(CamelModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v
