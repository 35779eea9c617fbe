import argparse
import logging
import sys
from pathlib import Path

from rotating_csrf.app_shell.config import validate_csrf_rules
from rotating_csrf.components.csrf import (
    CsrfService,
    GenerateInput,
    ValidateInput,
    build_config,
    create_csrf_service,
    run_generate,
    run_validate,
)
from rotating_csrf.rules.loader import DEFAULT_RULES, load_rules
from rotating_csrf.rules.models import Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str | None) -> Rules:
    if path is None:
        if Path(RULES_PATH).exists():
            return load_rules(Path(RULES_PATH))
        return DEFAULT_RULES

    if not Path(path).exists():
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)
    return load_rules(Path(path))


def handle_generate(rules: Rules, args: argparse.Namespace) -> int:
    out = run_generate(GenerateInput(), rules=rules.csrf)
    print(f"Token: {out.token}")
    if not out.success:
        for err in out.errors:
            logger.error(err.message)
        return 1
    print(f"Hash: {out.token_hash}")
    return 0


def handle_validate(rules: Rules, args: argparse.Namespace) -> int:
    out = run_validate(ValidateInput(token=args.token, token_hash=args.hash), rules=rules.csrf)
    if not out.matched:
        print("invalid")
        return 1
    print(f"valid (salt index {out.salt_index})")
    if out.rotated:
        print("Token matched a retired salt; issue a new one.")
    return 0


def handle_salts(rules: Rules, args: argparse.Namespace) -> int:
    service: CsrfService = create_csrf_service(config=build_config(rules.csrf))
    count = service.salt_count()
    # Never print salt values
    print(f"{count} salt(s) configured in {rules.csrf.salts.env_key}.")
    return 0 if count else 1


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Rotating-salt CSRF token CLI")
    parser.add_argument("--rules", default=None, help=f"Rules file (default: {RULES_PATH})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # generate
    subparsers.add_parser("generate", help="Issue a new token and hash")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Check a token against a hash")
    validate_parser.add_argument("token", help="Token presented by the client")
    validate_parser.add_argument("hash", help="Stored hash for the token")

    # salts
    subparsers.add_parser("salts", help="Report salt configuration")

    args = parser.parse_args(argv)
    rules = get_rules(args.rules)
    validate_csrf_rules(rules, create_csrf_service(config=build_config(rules.csrf)))

    if args.command == "generate":
        sys.exit(handle_generate(rules, args))
    elif args.command == "validate":
        sys.exit(handle_validate(rules, args))
    elif args.command == "salts":
        sys.exit(handle_salts(rules, args))


if __name__ == "__main__":
    main()
