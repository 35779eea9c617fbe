"""
CSRF component port definitions.
"""

from __future__ import annotations

from rotating_csrf.core.ports.salts import SaltSourcePort, TokenSourcePort

__all__ = ["SaltSourcePort", "TokenSourcePort"]
