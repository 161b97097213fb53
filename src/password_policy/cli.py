from __future__ import annotations

import argparse
import json
import logging
import os
from getpass import getpass

from .config import ConfigError, generator_default_length, load_settings, log_level, write_default_settings
from .passwords import (
    DEFAULT_LENGTH,
    InvalidArgumentError,
    assess_password,
    generate_password,
    is_strong_password,
    missing_requirements,
)


LOGGER = logging.getLogger(__name__)


def _verdict(strong: bool) -> str:
    return "yes" if strong else "no"


def _configure_logging(args: argparse.Namespace, settings: dict) -> None:
    level = "DEBUG" if args.verbose else log_level(settings)
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s - %(message)s")


def _read_password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return args.password
    if args.password_env:
        value = os.environ.get(args.password_env)
        if value is not None:
            return value
        LOGGER.info("%s is not set; prompting instead", args.password_env)
    return getpass("Password to check: ")


def _cmd_generate(args: argparse.Namespace) -> int:
    length = args.length if args.length is not None else generator_default_length(args.settings)
    if args.count < 1:
        raise InvalidArgumentError("count must be at least 1")
    for _ in range(args.count):
        password = generate_password(length)
        if args.check:
            print(f"{password}  strong={_verdict(is_strong_password(password))}")
        else:
            print(password)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    password = _read_password(args)
    strong = is_strong_password(password)
    if args.json:
        print(json.dumps(assess_password(password).to_dict(), indent=2))
        return 0 if strong else 1
    print(f"Strong password: {_verdict(strong)}")
    missing = missing_requirements(password)
    if missing:
        print("Missing:")
        for item in missing:
            print(f"- {item}")
    return 0 if strong else 1


def _cmd_demo(args: argparse.Namespace) -> int:
    try:
        password = generate_password(args.length)
        print(f"Generated password: {password}")
        print(f"Strong password: {_verdict(is_strong_password(password))}")
    except InvalidArgumentError as exc:
        print(f"Error: {exc}")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    path, written = write_default_settings(args.config, overwrite=args.force)
    if written:
        print(f"Wrote default settings to {path}")
    else:
        print(f"Settings file already exists: {path} (use --force to overwrite)")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Password Policy - generate and check passwords against a four-class policy")
    parser.add_argument("--config", default=None, help="Path to the JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    cmd_generate = sub.add_parser("generate", help="Generate random passwords")
    cmd_generate.add_argument("--length", type=int, default=None, help="Password length (default from settings, 12)")
    cmd_generate.add_argument("--count", type=int, default=1, help="Number of passwords to print")
    cmd_generate.add_argument("--check", action="store_true", help="Print the strength verdict next to each password")
    cmd_generate.set_defaults(func=_cmd_generate)

    cmd_check = sub.add_parser("check", help="Check whether a password is strong")
    cmd_check.add_argument("password", nargs="?", default=None, help="Password to check (prompted when omitted)")
    cmd_check.add_argument("--password-env", default=None, help="Read the password from environment variable name")
    cmd_check.add_argument("--json", action="store_true", help="Print the assessment as JSON")
    cmd_check.set_defaults(func=_cmd_check)

    cmd_demo = sub.add_parser("demo", help="Generate a password, print it, and print its strength verdict")
    cmd_demo.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="Password length")
    cmd_demo.set_defaults(func=_cmd_demo)

    cmd_init = sub.add_parser("init", help="Write the default settings file")
    cmd_init.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    cmd_init.set_defaults(func=_cmd_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.settings = load_settings(args.config)
        _configure_logging(args, args.settings)
        return int(args.func(args))
    except (InvalidArgumentError, ConfigError) as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
