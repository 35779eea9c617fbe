import logging
import sys

from rotating_csrf.components.csrf import CsrfService, NoSaltsConfiguredError
from rotating_csrf.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_csrf_rules(rules: Rules, service: CsrfService) -> None:
    """
    Validate operational requirements before startup.
    """
    try:
        service.require_salts()
    except NoSaltsConfiguredError as e:
        if rules.csrf.salts.require_at_startup:
            print(f"CRITICAL: {e}", file=sys.stderr)
            sys.exit(1)
        # Generate will keep reporting this per call
        logger.warning("%s; CSRF protection is unavailable", e)
        return

    logger.info("CSRF configuration validated (%d salt(s))", service.salt_count())
