"""
CSRF component - anti-forgery token issuing and verification.

Handles token generation, hashing under the current salt, and verification
across the rotating salt list.

Invariants:
- I1: New hashes always use the current salt (index 0)
- I2: A token is returned from generate even when hashing is impossible
- I3: Validation tries salts current-first and stops at the first match
- I4: Any derivation error during validation rejects the token
"""

from __future__ import annotations

from rotating_csrf.rules.models import CsrfRules

from ._impl import CsrfConfig, CsrfService, create_csrf_service
from .models import (
    GenerateInput,
    GenerateOutput,
    ValidateInput,
    ValidateOutput,
)
from .ports import SaltSourcePort, TokenSourcePort


def build_config(rules: CsrfRules | None) -> CsrfConfig:
    """Build CSRF config from rules."""
    if rules is None:
        return CsrfConfig()

    return CsrfConfig(
        salts_env_key=rules.salts.env_key,
        token_length=rules.tokens.length,
        log_retired_salt_matches=rules.logging.log_retired_salt_matches,
    )


def _create_service(
    salt_source: SaltSourcePort | None,
    token_source: TokenSourcePort | None,
    rules: CsrfRules | None,
) -> CsrfService:
    return create_csrf_service(
        salt_source=salt_source,
        token_source=token_source,
        config=build_config(rules),
    )


# --- Component Entry Points ---


def run_generate(
    inp: GenerateInput,
    *,
    salt_source: SaltSourcePort | None = None,
    token_source: TokenSourcePort | None = None,
    rules: CsrfRules | None = None,
) -> GenerateOutput:
    """
    Issue a new token/hash pair.

    Args:
        inp: Generate input (no fields).
        salt_source: Salt source port; the environment when omitted.
        token_source: Optional token source port.
        rules: Optional CSRF rules for configuration.

    Returns:
        GenerateOutput with token, hash and errors.
    """
    service = _create_service(salt_source, token_source, rules)
    token, token_hash, errors = service.generate()

    return GenerateOutput(
        token=token,
        token_hash=token_hash,
        errors=errors,
        success=len(errors) == 0,
    )


def run_validate(
    inp: ValidateInput,
    *,
    salt_source: SaltSourcePort | None = None,
    rules: CsrfRules | None = None,
) -> ValidateOutput:
    """
    Verify a presented token against its stored hash.

    Returns:
        ValidateOutput with match flag and matching salt index.
    """
    service = _create_service(salt_source, None, rules)
    matched, salt_index = service.validate(inp.token, inp.token_hash)
    return ValidateOutput(matched=matched, salt_index=salt_index)


def run(
    inp: GenerateInput | ValidateInput,
    *,
    salt_source: SaltSourcePort | None = None,
    token_source: TokenSourcePort | None = None,
    rules: CsrfRules | None = None,
) -> GenerateOutput | ValidateOutput:
    if isinstance(inp, GenerateInput):
        return run_generate(inp, salt_source=salt_source, token_source=token_source, rules=rules)

    elif isinstance(inp, ValidateInput):
        return run_validate(inp, salt_source=salt_source, rules=rules)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
