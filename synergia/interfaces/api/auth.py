"""Session API routes: login, logout, me."""

from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from synergia.application.services.auth_service import authenticate_user, create_session_token
from synergia.config import get_settings
from synergia.core.exceptions import UnauthorizedException
from synergia.domain.models.user import User
from synergia.domain.schemas.auth import LoginRequest, SessionResponse, UserRead
from synergia.infrastructure.database import get_db
from synergia.interfaces.api.deps import require_session

router = APIRouter(prefix="/api", tags=["Auth"])
settings = get_settings()


@router.post("/login", response_model=SessionResponse)
def login(body: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = authenticate_user(db, body.email, body.password)
    if not user:
        raise UnauthorizedException("Email ou senha incorretos")

    lifetime = timedelta(minutes=settings.SESSION_EXPIRATION_MINUTES)
    token = create_session_token(data={"sub": user.email, "role": user.role}, expires_delta=lifetime)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(lifetime.total_seconds()),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    return SessionResponse(
        user=UserRead.model_validate(user),
        expires_at=datetime.now(timezone.utc) + lifetime,
    )


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
    return {"status": "logged_out"}


@router.get("/me", response_model=UserRead)
def get_me(user: User = Depends(require_session)):
    return UserRead.model_validate(user)
