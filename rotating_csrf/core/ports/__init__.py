# rotating-csrf — Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from rotating_csrf.core.ports.salts import SaltSourcePort, TokenSourcePort

__all__ = [
    "SaltSourcePort",
    "TokenSourcePort",
]
