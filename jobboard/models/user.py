from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base, utcnow
from jobboard.models.enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.JOB_SEEKER.value)  # job_seeker | admin
    phone = Column(String)
    location = Column(String)
    skills = Column(JSON, default=list)
    experience = Column(String)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    jobs = relationship("Job", back_populates="posted_by")
    applications = relationship("Application", back_populates="applicant")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
