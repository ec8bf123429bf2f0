from sqlalchemy import Column, String, Text, Float, ForeignKey, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base, utcnow
from jobboard.models.enums import Currency, JobStatus


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, default=list)
    location = Column(String, nullable=False)
    type = Column(String, nullable=False)  # full-time | part-time | contract | internship
    salary_min = Column(Float)
    salary_max = Column(Float)
    salary_currency = Column(String, default=Currency.USD.value)
    skills = Column(JSON, default=list)
    experience = Column(String, nullable=False)  # entry | mid | senior | executive
    status = Column(String, nullable=False, default=JobStatus.ACTIVE.value, index=True)
    posted_by_id = Column(String, ForeignKey("users.id"), nullable=False)
    application_deadline = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    posted_by = relationship("User", back_populates="jobs")
    applications = relationship("Application", back_populates="job")
