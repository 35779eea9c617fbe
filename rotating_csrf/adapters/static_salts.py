"""
Static Salt Source (SaltSourcePort implementation).

Serves a fixed, explicitly supplied salt list. Used when salts come from a
secrets manager at startup rather than the environment, and in tests.
"""

from __future__ import annotations

from collections.abc import Iterable


class StaticSaltSource:
    """Salt source over an in-memory list."""

    def __init__(self, salts: Iterable[str] = ()) -> None:
        self._salts = list(salts)
        if any(salt == "" for salt in self._salts):
            raise ValueError("Salt list must not contain empty salts")

    def get_salt_list(self) -> list[str]:
        return list(self._salts)

    def rotate(self, new_salt: str, keep: int | None = None) -> None:
        """
        Put a new current salt in front, retiring the previous ones.

        Args:
            new_salt: Non-empty salt to become current.
            keep: If set, retain at most this many salts in total.
        """
        if not new_salt:
            raise ValueError("New salt must not be empty")
        salts = [new_salt, *self._salts]
        if keep is not None:
            if keep < 1:
                raise ValueError(f"keep must be at least 1 (got {keep})")
            salts = salts[:keep]
        self._salts = salts
