"""Command-line entry point.

Usage:
    python -m fiscalcode.main verify RSSMRA85H52F205C
    python -m fiscalcode.main decode RSSMRA85H52F205C
    python -m fiscalcode.main generate --name Maria --surname Rossi \\
        --birthdate 1985-06-12 --gender F --place F205
    python -m fiscalcode.main random --seed 19 --count 5
    python -m fiscalcode.main omocodes ZLKESP25B55Y463L
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import date

import structlog
from pydantic import ValidationError

from fiscalcode.codec import decode, generate, generate_omocodes, generate_random, verify
from fiscalcode.config import settings
from fiscalcode.logging_config import configure_logging
from fiscalcode.schemas.person import Gender, PersonInput

logger = structlog.get_logger(__name__)


# ── Subcommands ──────────────────────────────────────────────────────


def cmd_verify(args: argparse.Namespace) -> int:
    result = verify(args.code)
    print(result.model_dump_json())
    if not result.valid:
        logger.info("code_rejected", code=args.code, kind=result.error.kind)
        return 1
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    result = decode(args.code)
    print(result.model_dump_json())
    return 0 if result.valid else 1


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        person = PersonInput(
            name=args.name,
            surname=args.surname,
            birthdate=args.birthdate,
            gender=args.gender,
            place_code=args.place,
        )
    except ValidationError as e:
        logger.info("invalid_person_data", errors=e.error_count())
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(generate(person))
    return 0


def cmd_random(args: argparse.Namespace) -> int:
    for i in range(args.count):
        seed = None if args.seed is None else args.seed + i
        print(generate_random(seed))
    return 0


def cmd_omocodes(args: argparse.Namespace) -> int:
    result = verify(args.code)
    if not result.valid:
        print(result.model_dump_json())
        return 1

    for omocode in generate_omocodes(args.code):
        print(omocode)
    return 0


# ── Parser ───────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fiscalcode",
        description="Generate, verify and decode Italian fiscal codes",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"default: {settings.log_level}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_verify = subparsers.add_parser("verify", help="Verify a fiscal code")
    p_verify.add_argument("code")
    p_verify.set_defaults(func=cmd_verify)

    p_decode = subparsers.add_parser("decode", help="Decode birth data from a fiscal code")
    p_decode.add_argument("code")
    p_decode.set_defaults(func=cmd_decode)

    p_generate = subparsers.add_parser("generate", help="Generate a fiscal code from personal data")
    p_generate.add_argument("--name", required=True)
    p_generate.add_argument("--surname", required=True)
    p_generate.add_argument("--birthdate", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    p_generate.add_argument("--gender", required=True, choices=[g.value for g in Gender])
    p_generate.add_argument("--place", required=True, help="Belfiore code, e.g. F205")
    p_generate.set_defaults(func=cmd_generate)

    p_random = subparsers.add_parser("random", help="Generate random valid fiscal codes")
    p_random.add_argument("--seed", type=int, default=None)
    p_random.add_argument("--count", type=int, default=1)
    p_random.set_defaults(func=cmd_random)

    p_omocodes = subparsers.add_parser("omocodes", help="List the omocodes of a fiscal code")
    p_omocodes.add_argument("code")
    p_omocodes.set_defaults(func=cmd_omocodes)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
