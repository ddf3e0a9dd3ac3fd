"""
Token helpers - JWT access tokens for the assistant API.

Login and registration live in the account service, which signs tokens with
the shared SECRET_KEY. This API only verifies them (core/dependencies.py);
create_access_token mints compatible tokens for tests and local tooling.
"""
from datetime import datetime, timedelta, timezone

from jose import jwt

from assistant_api.app.core.config import settings


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Encode `data` as a signed JWT with an `exp` claim."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)
