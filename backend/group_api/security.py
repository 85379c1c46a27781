"""Password hashing, token issue and the bearer-token dependency."""
import logging
import secrets
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from group_api.config import settings
from group_api.database import get_db
from group_api.errors import BadCredentialsError
from group_api.models.user import User

logger = logging.getLogger(__name__)

_hasher = PasswordHasher()
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check `password` against an argon2 hash."""
    try:
        _hasher.verify(hashed, password)
        return True
    except VerifyMismatchError:
        return False


def generate_token() -> str:
    return secrets.token_hex(settings.TOKEN_BYTES)


def require_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller from `Authorization: Bearer <token>`.

    Raises BadCredentialsError when the header is missing, uses another
    scheme, or carries a token no user currently holds.
    """
    if credentials is None:
        logger.info("Authentication failed: missing bearer token")
        raise BadCredentialsError()

    user = db.query(User).filter(User.token == credentials.credentials).first()
    if user is None:
        logger.info("Authentication failed: unknown bearer token")
        raise BadCredentialsError()
    return user
