"""
Dependency injection utilities - DB session and Bearer-token user resolution
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from assistant_api.app.core.config import settings
from assistant_api.app.core.logging_config import get_logger
from assistant_api.app.db.session import SessionLocal
from assistant_api.app.models.user import User

logger = get_logger("core.dependencies")
security = HTTPBearer(auto_error=False)


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _user_id_from_token(token: str) -> int:
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.algorithm]
        )
    except JWTError:
        raise _unauthorized("Invalid or expired token")
    subject = payload.get("sub")
    if not subject or not str(subject).isdigit():
        raise _unauthorized("Invalid token")
    return int(subject)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the authenticated, active user from the Bearer JWT."""
    if not credentials:
        raise _unauthorized("Not authenticated")
    user_id = _user_id_from_token(credentials.credentials)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise _unauthorized("User not found")
    if not user.is_active:
        logger.info("Rejected inactive user user_id=%s", user_id)
        raise _unauthorized("User account is inactive")
    return user
