"""
Filter and pagination descriptors for the list endpoints.

Request parameters arrive untrusted. Paging values never cause an error:
anything missing, non-numeric or below 1 falls back to its default. Filter
values are already validated against their enums by the routers, so the
classes here only translate them into SQLAlchemy criteria.
"""

import math
import re
from dataclasses import dataclass

from sqlalchemy import and_, or_
from sqlalchemy.orm import Query

from jobboard.config import settings
from jobboard.models.application import Application
from jobboard.models.enums import JobStatus
from jobboard.models.job import Job
from jobboard.models.user import User

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_positive_int(raw: object, default: int) -> int:
    """Lenient integer parse: "3" -> 3, "3abc" -> 3, "abc"/None/"0"/"-2" -> default."""
    if raw is None:
        return default
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if not match:
            return default
        value = int(match.group(1))
    return value if value >= 1 else default


def _like_pattern(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@dataclass(frozen=True)
class PageParams:
    page: int = 1
    limit: int = 10

    @classmethod
    def from_query(cls, page: object = None, limit: object = None) -> "PageParams":
        page_num = parse_positive_int(page, 1)
        page_size = parse_positive_int(limit, settings.default_page_size)
        return cls(page=page_num, limit=page_size)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def envelope(self, total: int) -> dict:
        return {
            "current": self.page,
            "pages": math.ceil(total / self.limit),
            "total": total,
        }


@dataclass(frozen=True)
class JobFilter:
    active_only: bool = True
    status: str | None = None
    location: str | None = None
    type: str | None = None
    experience: str | None = None
    search: str | None = None

    def criteria(self) -> list:
        clauses = []
        if self.active_only:
            clauses.append(Job.status == JobStatus.ACTIVE.value)
        elif self.status:
            clauses.append(Job.status == self.status)
        if self.location and self.location.strip():
            clauses.append(Job.location.ilike(_like_pattern(self.location.strip()), escape="\\"))
        if self.type:
            clauses.append(Job.type == self.type)
        if self.experience:
            clauses.append(Job.experience == self.experience)
        terms = (self.search or "").split()
        if terms:
            # Any term may match any of the indexed text fields
            clauses.append(
                or_(
                    *(
                        column.ilike(_like_pattern(term), escape="\\")
                        for term in terms
                        for column in (Job.title, Job.company, Job.description)
                    )
                )
            )
        return clauses

    def apply(self, q: Query) -> Query:
        clauses = self.criteria()
        return q.filter(and_(*clauses)) if clauses else q


@dataclass(frozen=True)
class ApplicationFilter:
    status: str | None = None
    job_id: str | None = None

    def apply(self, q: Query) -> Query:
        if self.status:
            q = q.filter(Application.status == self.status)
        if self.job_id:
            q = q.filter(Application.job_id == self.job_id)
        return q


@dataclass(frozen=True)
class UserFilter:
    role: str | None = None

    def apply(self, q: Query) -> Query:
        if self.role:
            q = q.filter(User.role == self.role)
        return q
