import os

# Settings are read at import time; configure before the app loads.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import jobboard.models  # noqa: F401
from jobboard.core.security import create_access_token
from jobboard.database import Base, get_db
from jobboard.main import app
from jobboard.models.enums import UserRole
from jobboard.repos import job_repo, user_repo

ENGINEER_JOB = {
    "title": "Engineer",
    "company": "Acme",
    "description": "Build and maintain backend services.",
    "location": "Remote",
    "type": "full-time",
    "experience": "mid",
    "status": "active",
}


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _db_override():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


@pytest.fixture
def seeker(db):
    return user_repo.create(db, "Alice Seeker", "a@x.com", "secret12")


@pytest.fixture
def admin(db):
    return user_repo.create(db, "Ada Admin", "admin@x.com", "adminpass", role=UserRole.ADMIN.value)


@pytest.fixture
def seeker_headers(seeker):
    return auth_headers(seeker)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def active_job(db, admin):
    return job_repo.create(db, admin.id, dict(ENGINEER_JOB))


@pytest.fixture
def closed_job(db, admin):
    return job_repo.create(db, admin.id, {**ENGINEER_JOB, "title": "Closed Role", "status": "closed"})
