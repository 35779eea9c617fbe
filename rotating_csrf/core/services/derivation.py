"""
Token hash derivation.

Maps a (token, salt) pair to a fixed-length, non-reversible hash using
scrypt with fixed cost parameters. The hash is what gets stored; the token
cannot be recovered from it.

Key behaviors:
- Deterministic: the same token and salt always give the same hash
- Empty salts are rejected before any expensive work
- Output is 32 bytes, standard base64 with padding
- A failure inside scrypt is fatal to the process
"""

from __future__ import annotations

import base64
import hashlib
import logging
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivationParams:
    """scrypt cost parameters. Generation and validation must agree on these."""

    n: int = 1 << 15  # CPU/memory cost
    r: int = 8  # block size
    p: int = 1  # parallelism
    dklen: int = 32  # output bytes

    @property
    def maxmem(self) -> int:
        """Memory ceiling passed to scrypt (twice the working set)."""
        return 2 * 128 * self.r * (self.n + self.p + 2)


DEFAULT_PARAMS = DerivationParams()


class InvalidInputError(ValueError):
    """Raised when a token or salt cannot be used as scrypt input."""


class InvalidSaltError(InvalidInputError):
    """Raised when derivation is asked to use an empty salt."""


def _encode(value: str, name: str, errors: str = "strict") -> bytes:
    try:
        return value.encode("utf-8", errors)
    except UnicodeEncodeError as e:
        raise InvalidInputError(f"{name} is not encodable as UTF-8") from e


def derive_key(token: str, salt: str, params: DerivationParams = DEFAULT_PARAMS) -> bytes:
    """
    Run scrypt over the token with the given salt.

    Args:
        token: Token used as the scrypt password.
        salt: Non-empty salt.
        params: Cost parameters (default DEFAULT_PARAMS).

    Returns:
        Raw derived key of ``params.dklen`` bytes.

    Raises:
        InvalidSaltError: If salt is empty.
        InvalidInputError: If token or salt cannot be encoded.
    """
    if not salt:
        raise InvalidSaltError("Cannot derive a token hash with an empty salt")

    password = _encode(token, "token")
    # os.environ decodes undecodable bytes with surrogateescape; undo that
    salt_bytes = _encode(salt, "salt", "surrogateescape")

    try:
        return hashlib.scrypt(
            password,
            salt=salt_bytes,
            n=params.n,
            r=params.r,
            p=params.p,
            maxmem=params.maxmem,
            dklen=params.dklen,
        )
    except (ValueError, MemoryError) as e:
        # Parameters are static; a failure here means the build is broken.
        logger.critical("scrypt derivation failed with params %s: %s", params, e)
        sys.exit(1)


def derive_hash(token: str, salt: str, params: DerivationParams = DEFAULT_PARAMS) -> str:
    """
    Derive the storable hash for a token under one salt.

    Returns:
        Base64 text of the derived key.

    Raises:
        InvalidSaltError: If salt is empty.
        InvalidInputError: If token or salt cannot be encoded.
    """
    return base64.b64encode(derive_key(token, salt, params)).decode("ascii")
