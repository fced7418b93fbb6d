"""
JWT helpers. Tokens carry the caller id in the "userId" claim ("sub" is accepted too).
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from jobify.app.core.config import settings
from jobify.app.core.errors import UnauthenticatedError


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed access token for user_id."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"userId": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> str:
    """Verify token and return the user id it carries. Raises UnauthenticatedError."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise UnauthenticatedError()
    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        raise UnauthenticatedError()
    return str(user_id)
