import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.core.security import verify_password, create_access_token, decode_access_token
from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.user_repo import get_by_email, get_by_id, create as create_user
from jobboard.schemas.auth import UserRegister, UserLogin
from jobboard.serializers import user_to_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite=settings.auth_cookie_samesite,
        path="/",
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite=settings.auth_cookie_samesite,
    )


def _session_response(user: User, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Token in the body for client-side fetches, and in an HTTP-only cookie for the browser session."""
    token = create_access_token(user.id, user.role)
    response = JSONResponse(
        status_code=status_code,
        content={"token": token, "user": user_to_response(user)},
    )
    set_auth_cookie(response, token)
    return response


def _duplicate_email() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="User already exists",
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: UserRegister, db: Session = Depends(get_db)):
    try:
        if get_by_email(db, data.email):
            raise _duplicate_email()
        try:
            user = create_user(
                db,
                data.name,
                data.email,
                data.password,
                role=data.role.value,
                phone=data.phone,
                location=data.location,
                skills=data.skills,
                experience=data.experience.value if data.experience else None,
            )
        except IntegrityError as e:
            db.rollback()
            raise _duplicate_email() from e
        logger.info("User registered: %s role=%s", user.email, user.role)
        return _session_response(user, status.HTTP_201_CREATED)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Register failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e


@router.post("/login")
def login(data: UserLogin, db: Session = Depends(get_db)):
    try:
        user = get_by_email(db, data.email)
        # Same answer for unknown email and wrong password
        if not user or not verify_password(data.password, user.password_hash):
            logger.info("Login failed for email=%s", data.email)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid credentials",
            )
        logger.info("User logged in: %s", user.email)
        return _session_response(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error") from e


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return {"user": user_to_response(user)}


@router.get("/check")
def check_session(request: Request, db: Session = Depends(get_db)):
    """Exchange the session cookie for the bearer token and profile. Clears the cookie when it is no longer valid."""
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": "No token found"})

    user_id = decode_access_token(token)
    user = get_by_id(db, user_id) if user_id else None
    if not user:
        logger.info("Session check failed: invalid cookie token")
        response = JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": "Invalid token"})
        clear_auth_cookie(response)
        return response
    return {"token": token, "user": user_to_response(user)}


@router.post("/logout")
def logout():
    response = JSONResponse(content={"message": "Logged out"})
    clear_auth_cookie(response)
    return response
