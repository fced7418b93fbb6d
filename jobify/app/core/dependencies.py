"""
Dependency injection utilities
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from jobify.app.core.errors import DemoUserError, UnauthenticatedError
from jobify.app.core.identity import Identity
from jobify.app.core.logging_config import get_logger
from jobify.app.core.security import decode_access_token
from jobify.app.db import session as session_module

logger = get_logger("auth")
security = HTTPBearer(auto_error=False)


def get_db() -> Session:
    """Get database session"""
    db = session_module.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Identity:
    """Resolve the caller from the bearer token. No DB lookup."""
    if not credentials or credentials.scheme.lower() != "bearer":
        logger.warning("Rejected request without bearer credentials")
        raise UnauthenticatedError()
    try:
        user_id = decode_access_token(credentials.credentials)
    except UnauthenticatedError:
        logger.warning("Rejected request with invalid token")
        raise
    return Identity.for_user(user_id)


def require_writable_identity(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """Same as get_current_identity, but the demo account may not write."""
    if identity.test_user:
        raise DemoUserError()
    return identity
