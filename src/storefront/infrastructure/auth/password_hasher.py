"""Password hashing utility using Argon2.

Stored credentials only ever hold the Argon2id hash, never the plaintext.
Each hash embeds its own random salt, so hashing the same password twice
yields different strings that both verify.
"""

from collections.abc import Mapping
from typing import Any

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Args:
        password: The plaintext password to hash.

    Returns:
        The hashed password string.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    A mismatch returns False. A malformed ``hashed`` value is not a mismatch:
    argon2's ``InvalidHashError`` propagates to the caller.

    Args:
        password: The plaintext password to verify.
        hashed: The stored hash to verify against.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        _hasher.verify(hashed, password)
        return True
    except VerifyMismatchError:
        return False


def is_valid_password(user: Mapping[str, Any] | Any, password: str) -> bool:
    """Check a candidate password against a user record's stored hash.

    Args:
        user: Credential record, either a mapping with a ``password`` key
            or an object with a ``password`` attribute holding the hash.
        password: The candidate plaintext password.

    Returns:
        True if the password matches the stored hash.
    """
    if isinstance(user, Mapping):
        hashed = user["password"]
    else:
        hashed = user.password
    return verify_password(password, hashed)


def needs_rehash(hashed: str) -> bool:
    """Check if a password hash was produced with outdated parameters."""
    return _hasher.check_needs_rehash(hashed)
