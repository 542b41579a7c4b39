"""Password hashing for stored credentials."""

import os

import bcrypt

# 2^10 iterations; raise in production via BCRYPT_ROUNDS
BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', '10'))

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash password using bcrypt.

    Input past ``BCRYPT_MAX_BYTES`` is cut off before hashing, as older
    bcrypt releases did implicitly.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hashed password as string
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    secret = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(secret, salt).decode('utf-8')
