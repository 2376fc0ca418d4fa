"""Short public identifiers."""

import secrets
import string

ALPHABET = string.ascii_letters + string.digits


def generate_short_id(length: int) -> str:
    """Generate a random alphanumeric identifier.

    Uses the ``secrets`` module so identifiers are not guessable.

    Args:
        length: Number of characters

    Returns:
        Identifier made of ASCII letters and digits
    """
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
