"""
Security Utilities

Password hashing (bcrypt) and signed session tokens (JWT via python-jose).
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from docuprint.core.config import settings

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    # Bcrypt has a 72 byte limit
    password_bytes = password.encode("utf-8")[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=settings.bcrypt_rounds))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its bcrypt hash."""
    password_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def create_session_token(
    subject: str,
    role: str,
    expires_delta: timedelta | None = None,
    additional_claims: dict[str, Any] | None = None,
) -> str:
    """
    Create a signed session token.

    Args:
        subject: Identity the token is issued for (resident or admin id)
        role: Role discriminator ("resident" or "admin")
        expires_delta: Lifetime of the token (defaults to SESSION_TTL_DAYS)
        additional_claims: Extra claims to embed

    Returns:
        Encoded JWT string
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(days=settings.session_ttl_days))

    to_encode: dict[str, Any] = dict(additional_claims or {})
    to_encode.update(
        {
            "sub": subject,
            "role": role,
            "type": SESSION_TOKEN_TYPE,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
    )
    return jwt.encode(to_encode, settings.session_secret_key, algorithm=settings.session_algorithm)


def decode_token(token: str) -> dict[str, Any] | None:
    """
    Decode and verify a session token.

    Returns:
        The claims, or None if the signature is invalid or the token expired
    """
    try:
        return jwt.decode(
            token,
            settings.session_secret_key,
            algorithms=[settings.session_algorithm],
        )
    except JWTError as e:
        logger.debug(f"Rejected session token: {e}")
        return None
