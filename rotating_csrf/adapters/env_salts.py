"""
Environment Salt Source (SaltSourcePort implementation).

Reads the salt list from a single process environment variable holding a
comma separated list, most current first:

    CSRF_SALTS="new-salt,previous-salt,oldest-salt"

Key behaviors:
- The variable is read on every call, so rotation needs no restart
- Unset and empty both mean "no salts" (empty list, never [""])
- No trimming, no deduplication: salts are taken verbatim
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_SALTS_ENV_KEY = "CSRF_SALTS"
SALT_DELIMITER = ","


def parse_salt_list(value: str | None) -> list[str]:
    """
    Split a configured salt string into an ordered salt list.

    Args:
        value: Raw configuration value (None when unset).

    Returns:
        Salts in configured order, or [] when the first entry is empty.
    """
    salts = (value or "").split(SALT_DELIMITER)
    if salts[0] == "":
        return []
    return salts


@dataclass
class EnvSaltSource:
    """
    Salt source backed by the process environment.

    ``environ`` defaults to os.environ; pass a mapping to read from
    somewhere else (tests, a secrets snapshot).
    """

    env_key: str = DEFAULT_SALTS_ENV_KEY
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    def get_salt_list(self) -> list[str]:
        return parse_salt_list(self.environ.get(self.env_key))
