"""
Key generation for stored mappings.

Keys are short lowercase alphanumeric strings. No uniqueness check is made
against existing mappings: a colliding key overwrites the stored entry.
"""

import secrets
import string

KEY_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_KEY_LENGTH = 11


def generate_key(length: int = DEFAULT_KEY_LENGTH) -> str:
    """
    Generate a random key.

    Args:
        length: Number of characters (must be positive)

    Returns:
        Random string drawn from a-z and 0-9
    """
    if length < 1:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))
