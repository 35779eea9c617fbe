"""
Token generation.

Tokens are opaque credentials handed to the client. They are fixed length,
alphanumeric, and drawn from the operating system CSPRNG via ``secrets``.

Single use is a caller policy; nothing is tracked here.
"""

from __future__ import annotations

import secrets
import string

TOKEN_LENGTH = 32
TOKEN_ALPHABET = string.ascii_letters + string.digits


def new_token(length: int = TOKEN_LENGTH) -> str:
    """
    Generate a random alphanumeric token.

    Each character is picked uniformly from TOKEN_ALPHABET. An entropy
    failure in the OS random source propagates; there is no fallback.

    Args:
        length: Number of characters (default TOKEN_LENGTH).

    Returns:
        Token string of exactly ``length`` characters.
    """
    if length < 1:
        raise ValueError(f"Token length must be positive (got {length})")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
