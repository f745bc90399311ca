"""FastAPI dependency: session cookie gate."""

import structlog
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from synergia.application.services.auth_service import decode_session_token, get_user_by_email
from synergia.config import get_settings
from synergia.core.exceptions import UnauthorizedException
from synergia.domain.models.user import User
from synergia.infrastructure.database import get_db

logger = structlog.get_logger(__name__)
settings = get_settings()


def require_session(request: Request, db: Session = Depends(get_db)) -> User:
    """Resolve the user behind the session cookie, or refuse with 401."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise UnauthorizedException("Sessão ausente, faça login")

    payload = decode_session_token(token)
    if payload is None:
        logger.info("Rejected session cookie", path=request.url.path)
        raise UnauthorizedException("Sessão inválida ou expirada")

    email = payload.get("sub")
    if email is None:
        raise UnauthorizedException("Sessão inválida")

    user = get_user_by_email(db, email)
    if user is None or not user.is_active:
        raise UnauthorizedException("Usuário não encontrado ou inativo")

    return user
