import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Protocol

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.config import settings

logger = logging.getLogger(__name__)


class PasswordHasher(Protocol):
    def hash(self, plaintext: str) -> str: ...

    def verify(self, plaintext: str, hashed: str) -> bool: ...


class PasslibHasher:
    """One-way password hashing backed by a passlib ``CryptContext``."""

    def __init__(self, schemes: Optional[List[str]] = None):
        self.context = CryptContext(schemes=schemes or settings.password_schemes, deprecated="auto")

    def hash(self, plaintext: str) -> str:
        return self.context.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return self.context.verify(plaintext, hashed)
        except ValueError:
            # Hash produced by a scheme this context does not know
            logger.warning("Password hash in an unrecognized format")
            return False


def create_access_token(subject: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT access token.

    Args:
        subject: User id stored in the ``sub`` claim
        email: User email stored alongside it
        expires_delta: Token lifetime, defaults to ``access_token_expire_minutes``

    Returns:
        str: Encoded token
    """
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode = {"sub": subject, "email": email, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key.get_secret_value(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token payload, or None if it is invalid or expired."""
    try:
        return jwt.decode(token, settings.secret_key.get_secret_value(), algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        return None
