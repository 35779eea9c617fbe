"""
rotating-csrf - anti-forgery tokens with rotating, server-held salts.

A random token goes to the client; a memory-hard hash of it, keyed by the
current salt, is kept server side. Older salts stay valid for verification
until they are removed from the configured list.
"""

from rotating_csrf.components.csrf import (
    CsrfService,
    create_csrf_service,
    run_generate,
    run_validate,
)
from rotating_csrf.core.services.derivation import (
    InvalidInputError,
    InvalidSaltError,
    derive_hash,
)
from rotating_csrf.core.services.tokens import TOKEN_LENGTH, new_token

__all__ = [
    "CsrfService",
    "InvalidInputError",
    "InvalidSaltError",
    "TOKEN_LENGTH",
    "create_csrf_service",
    "derive_hash",
    "new_token",
    "run_generate",
    "run_validate",
]
