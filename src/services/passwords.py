"""Password hashing with bcrypt."""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt configuration
# 12 rounds (2^12 = 4096 iterations); overridable via BCRYPT_ROUNDS
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash password using bcrypt with a freshly generated salt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        Bcrypt hashed password as string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify password against hash.

    Returns False for a malformed or missing hash instead of raising.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except (ValueError, TypeError) as e:
        logger.debug("Password hash verification failed", extra={"error": str(e)})
        return False
