from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.core.query import PageParams, UserFilter
from jobboard.core.security import hash_password, generate_id
from jobboard.models.enums import UserRole
from jobboard.models.user import User


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create(
    db: Session,
    name: str,
    email: str,
    password: str,
    *,
    role: str = UserRole.JOB_SEEKER.value,
    phone: str | None = None,
    location: str | None = None,
    skills: list[str] | None = None,
    experience: str | None = None,
) -> User:
    user = User(
        id=generate_id(),
        name=name,
        email=email.strip().lower(),
        password_hash=hash_password(password),
        role=role,
        phone=phone,
        location=location,
        skills=list(skills or []),
        experience=experience,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def set_role(db: Session, user_id: str, role: str) -> User | None:
    user = get_by_id(db, user_id)
    if not user:
        return None
    user.role = role
    db.commit()
    db.refresh(user)
    return user


def get_paginated(
    db: Session,
    user_filter: UserFilter,
    page: PageParams,
) -> tuple[list[User], int]:
    """List users newest first. Returns (items, total)."""
    q = user_filter.apply(db.query(User))
    total = q.count()
    items = (
        q.order_by(User.created_at.desc(), User.id.desc())
        .offset(page.skip)
        .limit(page.limit)
        .all()
    )
    return items, total


def get_stats(db: Session) -> dict:
    """Return user counts for the admin dashboard."""
    total = db.query(func.count(User.id)).scalar() or 0
    job_seekers = db.query(func.count(User.id)).filter(User.role == UserRole.JOB_SEEKER.value).scalar() or 0
    admins = db.query(func.count(User.id)).filter(User.role == UserRole.ADMIN.value).scalar() or 0
    return {
        "total": total,
        "jobSeekers": job_seekers,
        "admins": admins,
    }
