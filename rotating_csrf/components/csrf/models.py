"""
CSRF component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Errors ---


@dataclass(frozen=True)
class CsrfError:
    """Caller-actionable CSRF error."""

    code: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class GenerateInput:
    """Input for issuing a new token/hash pair."""

    pass


@dataclass(frozen=True)
class ValidateInput:
    """Input for checking a presented token against its stored hash."""

    token: str
    token_hash: str


# --- Output Models ---


@dataclass(frozen=True)
class GenerateOutput:
    """
    Output for generate.

    ``token`` is always populated, even when no hash could be derived.
    """

    token: str
    token_hash: str
    errors: list[CsrfError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ValidateOutput:
    """Output for validate. ``salt_index`` is -1 when nothing matched."""

    matched: bool
    salt_index: int = -1

    @property
    def rotated(self) -> bool:
        """True when a retired salt matched and the token should be re-issued."""
        return self.matched and self.salt_index > 0
