"""
User identifier generation.

User ids are short opaque strings. Collisions are left to the store's
primary key constraint to reject.
"""
import secrets

# URL-safe character set, 64 symbols
SHORT_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"
SHORT_ID_LENGTH = 9


def generate_short_id(length: int = SHORT_ID_LENGTH) -> str:
    """Generate a random short id such as "Xk3_f9QaZ"."""
    return "".join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(length))
