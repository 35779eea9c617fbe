"""
CSRF component - anti-forgery tokens with rotating salts.
"""

from ._impl import (
    DEFAULT_CONFIG,
    ERR_INVALID_INPUT,
    ERR_NO_SALTS,
    CsrfConfig,
    CsrfService,
    NoSaltsConfiguredError,
    create_csrf_service,
)
from .component import build_config, run, run_generate, run_validate
from .models import (
    CsrfError,
    GenerateInput,
    GenerateOutput,
    ValidateInput,
    ValidateOutput,
)
from .ports import SaltSourcePort, TokenSourcePort

__all__ = [
    # Entry points
    "build_config",
    "run",
    "run_generate",
    "run_validate",
    # Input models
    "GenerateInput",
    "ValidateInput",
    # Output models
    "CsrfError",
    "GenerateOutput",
    "ValidateOutput",
    # Ports
    "SaltSourcePort",
    "TokenSourcePort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "ERR_INVALID_INPUT",
    "ERR_NO_SALTS",
    "CsrfConfig",
    "CsrfService",
    "NoSaltsConfiguredError",
    "create_csrf_service",
]
