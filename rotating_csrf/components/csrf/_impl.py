"""
CsrfService - token issuing and verification with salt rotation.

Composes a salt source, a token source and the scrypt derivation.

Key behaviors:
- generate() hashes a fresh token under the current salt (index 0)
- generate() still returns a token when no salts are configured
- validate() tries salts current-first and reports which one matched
- validate() fails closed: any derivation error rejects the whole check
- Hash comparison is constant time
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from rotating_csrf.adapters.env_salts import DEFAULT_SALTS_ENV_KEY, EnvSaltSource
from rotating_csrf.adapters.tokens import SecureTokenSource
from rotating_csrf.core.ports.salts import SaltSourcePort, TokenSourcePort
from rotating_csrf.core.services.derivation import (
    DEFAULT_PARAMS,
    DerivationParams,
    InvalidInputError,
    derive_hash,
)
from rotating_csrf.core.services.tokens import TOKEN_LENGTH

from .models import CsrfError

logger = logging.getLogger(__name__)

NO_MATCH: tuple[bool, int] = (False, -1)

ERR_NO_SALTS = "no_salts_configured"
ERR_INVALID_INPUT = "invalid_input"


# --- Configuration ---


@dataclass(frozen=True)
class CsrfConfig:
    """CSRF configuration from rules."""

    salts_env_key: str = DEFAULT_SALTS_ENV_KEY
    token_length: int = TOKEN_LENGTH
    log_retired_salt_matches: bool = True


DEFAULT_CONFIG = CsrfConfig()


# --- Exceptions ---


class NoSaltsConfiguredError(RuntimeError):
    """Raised by require_salts() when the salt source is empty."""


# --- Service ---


class CsrfService:
    """Issues and verifies anti-forgery token/hash pairs."""

    def __init__(
        self,
        salt_source: SaltSourcePort,
        token_source: TokenSourcePort | None = None,
        config: CsrfConfig | None = None,
        params: DerivationParams = DEFAULT_PARAMS,
    ) -> None:
        self._salt_source = salt_source
        self._config = config or DEFAULT_CONFIG
        self._token_source = token_source or SecureTokenSource(self._config.token_length)
        self._params = params

    @property
    def config(self) -> CsrfConfig:
        return self._config

    def _no_salts_message(self) -> str:
        return f"No CSRF salts configured (checked {self._config.salts_env_key})"

    def salt_count(self) -> int:
        """Number of salts currently configured."""
        return len(self._salt_source.get_salt_list())

    def require_salts(self) -> None:
        """Raise NoSaltsConfiguredError unless a usable current salt exists."""
        salts = self._salt_source.get_salt_list()
        if not salts or salts[0] == "":
            raise NoSaltsConfiguredError(self._no_salts_message())

    def generate(self) -> tuple[str, str, list[CsrfError]]:
        """
        Issue a new token and its hash under the current salt.

        Returns:
            (token, token_hash, errors). On error token_hash is "" and the
            token is still a freshly generated one.
        """
        token = self._token_source.new_token()

        salts = self._salt_source.get_salt_list()
        if not salts or salts[0] == "":
            logger.warning("CSRF generate: %s", self._no_salts_message())
            return token, "", [CsrfError(code=ERR_NO_SALTS, message=self._no_salts_message())]

        try:
            token_hash = derive_hash(token, salts[0], self._params)
        except InvalidInputError as e:
            return token, "", [CsrfError(code=ERR_INVALID_INPUT, message=str(e))]

        return token, token_hash, []

    def validate(self, token: str, token_hash: str) -> tuple[bool, int]:
        """
        Check a presented token against its stored hash.

        Returns:
            (True, index) of the first salt whose derived hash matches,
            otherwise (False, -1).
        """
        salts = self._salt_source.get_salt_list()
        if not salts:
            logger.debug("CSRF validate: no salts configured, rejecting")
            return NO_MATCH

        try:
            expected = token_hash.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("CSRF validate: hash is not encodable, rejecting")
            return NO_MATCH

        for idx, salt in enumerate(salts):
            try:
                computed = derive_hash(token, salt, self._params)
            except InvalidInputError as e:
                logger.warning("CSRF validate: %s (salt index %d), rejecting", e, idx)
                return NO_MATCH

            if hmac.compare_digest(computed.encode("ascii"), expected):
                if idx > 0 and self._config.log_retired_salt_matches:
                    logger.info("CSRF token matched retired salt at index %d", idx)
                return True, idx

        logger.debug("CSRF validate: no match across %d salt(s)", len(salts))
        return NO_MATCH


# --- Factory ---


def create_csrf_service(
    salt_source: SaltSourcePort | None = None,
    token_source: TokenSourcePort | None = None,
    config: CsrfConfig | None = None,
) -> CsrfService:
    """Create a CsrfService, reading salts from the environment by default."""
    config = config or DEFAULT_CONFIG
    if salt_source is None:
        salt_source = EnvSaltSource(env_key=config.salts_env_key)
    return CsrfService(salt_source=salt_source, token_source=token_source, config=config)
