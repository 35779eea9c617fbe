"""
Salt and token source interfaces.

Protocol-based interfaces so the orchestration never reads process state
directly. Adapters live in the sibling adapters package.

Key requirements:
- Salt lists are ordered current-first, oldest-last
- A salt list is either empty or contains only non-empty salts
- Token sources must be cryptographically secure in production
"""

from __future__ import annotations

from typing import Protocol


class SaltSourcePort(Protocol):
    """
    Source of candidate salts.

    Position 0 is the current salt used for new hashes. Later positions
    are retired salts that are still accepted during verification.
    """

    def get_salt_list(self) -> list[str]:
        """
        Return the ordered salt list.

        Returns:
            Salts, most recent first. Empty when nothing is configured.
        """
        ...


class TokenSourcePort(Protocol):
    """Source of fresh opaque tokens - enables deterministic testing."""

    def new_token(self) -> str:
        """Return a fresh random token."""
        ...
