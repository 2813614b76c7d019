"""
saudi-id command line entry point

Run with: saudi-id validate 1000000008
Or: python -m saudi_id.main generate --category resident --count 5
"""

import argparse
import json
import sys
import uuid
from typing import Optional, Sequence

import yaml
from pydantic import BaseModel

from saudi_id import __version__
from saudi_id.config.settings import Settings, load_settings, validate_environment
from saudi_id.core.errors import GenerationError, ParseError
from saudi_id.core.generator import NationalIdGenerator
from saudi_id.core.national_id import Category, parse
from saudi_id.logging.setup import get_logger, set_run_id, setup_logging
from saudi_id.models import CheckDigitRecord, NationalIdRecord, ScanMatch

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="saudi-id",
        description="Validate, generate and find Saudi national ID numbers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a YAML settings file")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of plain text")

    # Same options after the subcommand; SUPPRESS keeps the top-level values when absent
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Path to a YAML settings file")
    common.add_argument(
        "--json", action="store_true", default=argparse.SUPPRESS, help="Print JSON instead of plain text"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", parents=[common], help="Validate one or more national IDs")
    validate.add_argument("ids", nargs="+", metavar="ID", help="National ID to validate")

    generate = subparsers.add_parser("generate", parents=[common], help="Generate random valid national IDs")
    generate.add_argument(
        "--category",
        choices=[c.value for c in Category],
        help="Holder category (default from settings)",
    )
    generate.add_argument("--count", type=int, default=1, help="Number of IDs to generate")
    generate.add_argument("--seed", type=int, help="Seed for reproducible output")

    check_digit = subparsers.add_parser(
        "check-digit", parents=[common], help="Compute the check digit for a 9-digit payload"
    )
    check_digit.add_argument("payload", help="First 9 digits of the ID")

    scan = subparsers.add_parser("scan", parents=[common], help="Find valid national IDs in text")
    scan.add_argument("file", nargs="?", help="File to scan (default: stdin)")

    return parser


def _print_json(records: Sequence[BaseModel]) -> None:
    print(json.dumps([r.model_dump(mode="json") for r in records], ensure_ascii=False, indent=2))


def cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    records = []
    for value in args.ids:
        try:
            national_id = parse(value)
        except ParseError as e:
            records.append(NationalIdRecord.from_error(value, e))
        else:
            records.append(NationalIdRecord.from_national_id(national_id))

    if args.json:
        _print_json(records)
    else:
        for record in records:
            if record.valid:
                print(f"{record.national_id}\tvalid\t{record.category.value}")
            else:
                print(f"{record.national_id}\tinvalid\t{record.error_code}: {record.error}")

    invalid = sum(1 for r in records if not r.valid)
    logger.info(
        "Validated national IDs",
        extra={"event": "validate_done", "total": len(records), "invalid": invalid},
    )
    return EXIT_INVALID if invalid else EXIT_OK


def cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    category = Category(args.category or settings.default_category)
    generator = NationalIdGenerator(seed=args.seed, max_count=settings.max_generate_count)

    try:
        national_ids = generator.generate_many(category, args.count)
    except GenerationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.json:
        _print_json([NationalIdRecord.from_national_id(n) for n in national_ids])
    else:
        for national_id in national_ids:
            print(national_id)

    logger.info(
        "Generated national IDs",
        extra={"event": "generate_done", "category": category.value, "count": len(national_ids)},
    )
    return EXIT_OK


def cmd_check_digit(args: argparse.Namespace, settings: Settings) -> int:
    try:
        national_id = NationalIdGenerator.generate_with_payload(args.payload)
    except GenerationError as e:
        print(f"error: {e.code}: {e}", file=sys.stderr)
        return EXIT_INVALID

    record = CheckDigitRecord(
        payload=args.payload,
        check_digit=national_id.check_digit,
        national_id=national_id.to_text(),
    )
    if args.json:
        _print_json([record])
    else:
        print(f"{record.check_digit}\t{record.national_id}")
    return EXIT_OK


def cmd_scan(args: argparse.Namespace, settings: Settings) -> int:
    # Presidio is only imported when scanning
    from saudi_id.recognizers.sa_national_id import create_recognizer_from_settings, find_national_ids

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    recognizer = create_recognizer_from_settings(settings)
    matches = []
    for result in find_national_ids(text, recognizer):
        national_id = parse(text[result.start:result.end])
        matches.append(
            ScanMatch(
                national_id=national_id.to_text(),
                category=national_id.category,
                start=result.start,
                end=result.end,
                score=result.score,
            )
        )

    if args.json:
        _print_json(matches)
    else:
        for match in matches:
            print(f"{match.start}-{match.end}\t{match.national_id}\t{match.category.value}")

    logger.info("Scanned text", extra={"event": "scan_done", "matches": len(matches)})
    return EXIT_OK


COMMANDS = {
    "validate": cmd_validate,
    "generate": cmd_generate,
    "check-digit": cmd_check_digit,
    "scan": cmd_scan,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the saudi-id command line tool."""
    args = build_parser().parse_args(argv)

    validation_errors = validate_environment()
    if validation_errors:
        print("Configuration errors detected:", file=sys.stderr)
        for error in validation_errors:
            print(f"  - {error}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(level=settings.log_level, json_format=settings.log_format == "json")
    set_run_id(uuid.uuid4().hex[:12])
    logger.debug("Starting saudi-id", extra={"event": "cli_start", "command": args.command, "version": __version__})

    return COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
