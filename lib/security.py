# =============================================================================
# lib/security.py - Password Hashing
# =============================================================================
# bcrypt hashing for admin passwords via passlib.
# Hashes written by bcryptjs ($2a$ / $2b$ prefixes) verify unchanged.
# =============================================================================

import logging

from passlib.context import CryptContext

from app.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spend the time of a real check when the username wasn't found."""
    pwd_context.dummy_verify()


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Check a plaintext password against a stored hash.

    A missing or malformed stored hash never matches.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification error: {e}")
        return False
