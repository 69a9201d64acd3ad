"""
Token and password primitives.

Access tokens are HS256 JWTs bound to a user id with a fixed expiry. There is
no refresh flow and no revocation list: a token stays valid until ``exp``.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from gearguard.core.config import settings
from gearguard.domain.shared.exceptions import AuthError

logger = logging.getLogger(__name__)

# Argon2 for new hashes, bcrypt accepted for imported accounts
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")

ALGORITHM = "HS256"


def create_access_token(
    subject: str | Any, expires_delta: timedelta | None = None
) -> str:
    """Create a signed access token.

    Args:
        subject: The subject of the token (the user id)
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT token
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    to_encode = {
        "exp": now + expires_delta,
        "iat": now,
        "sub": str(subject),
        "type": "access",
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> int:
    """Verify signature, expiry and type of an access token.

    Returns:
        The user id carried in ``sub``

    Raises:
        AuthError: If the token cannot be trusted for any reason
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        logger.info("Rejected expired access token")
        raise AuthError("Token expired") from e
    except jwt.InvalidTokenError as e:
        logger.warning(f"Token validation failed: {e}")
        raise AuthError("Could not validate credentials") from e

    if payload.get("type") != "access":
        raise AuthError("Invalid token type")

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise AuthError("Invalid token subject") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
