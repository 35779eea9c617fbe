from rotating_csrf.rules.loader import DEFAULT_RULES, load_rules
from rotating_csrf.rules.models import CsrfRules, Rules

__all__ = ["CsrfRules", "DEFAULT_RULES", "Rules", "load_rules"]
