"""Password hashing utilities."""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh bcrypt salt.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor

    Returns:
        Encoded bcrypt hash
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash.

    Returns False for malformed hashes instead of raising.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
