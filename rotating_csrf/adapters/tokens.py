"""
Secure Token Source (TokenSourcePort implementation).

Production token source; delegates to the core generator.
"""

from __future__ import annotations

from rotating_csrf.core.services.tokens import TOKEN_LENGTH, new_token


class SecureTokenSource:
    def __init__(self, length: int = TOKEN_LENGTH) -> None:
        self.length = length

    def new_token(self) -> str:
        return new_token(self.length)
