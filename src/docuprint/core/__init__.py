"""
Core module - Configuration, database, security, and utilities.
"""

from docuprint.core.config import get_settings, settings
from docuprint.core.database import Base, close_db, get_db, init_db, session_scope
from docuprint.core.redis import close_redis, get_redis, init_redis
from docuprint.core.security import (
    create_session_token,
    decode_token,
    hash_password,
    verify_password,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "session_scope",
    # Redis
    "get_redis",
    "init_redis",
    "close_redis",
    # Security
    "hash_password",
    "verify_password",
    "create_session_token",
    "decode_token",
]
