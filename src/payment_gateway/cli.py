"""
Command-line interface for exercising the gateway reporting APIs.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Iterable, Sequence, Tuple

from .api import ConfigError, create_gateway, load_gateway_config
from .core.errors import GatewayError
from .core.models import Criteria


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _date(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not an ISO-8601 date") from exc


def _criteria(value: str) -> Criteria:
    parts = value.split(":", 2)
    if len(parts) != 3 or not parts[0]:
        raise argparse.ArgumentTypeError("Criteria must look like FIELD:OPERATOR:VALUE")
    field, operator, operand = parts
    return Criteria(field=int(field) if field.isdigit() else field, operator=operator, value=operand)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-gateway",
        description="Look up and search gateway transactions",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing GATEWAY_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fetch = commands.add_parser("get-transaction", help="Fetch one transaction by id")
    fetch.add_argument("payment_id")

    query = commands.add_parser("query", help="Search transactions in a date window")
    query.add_argument("--start-date", type=_date, required=True)
    query.add_argument("--end-date", type=_date, required=True)
    query.add_argument("--start-row", type=int, default=1)
    query.add_argument("--end-row", type=int, default=1000)
    query.add_argument(
        "--criteria",
        action="append",
        type=_criteria,
        metavar="FIELD:OPERATOR:VALUE",
        default=None,
        help="Search predicate, may be repeated",
    )
    return parser


def _print_json(payload: object) -> None:
    sys.stdout.write(json.dumps(payload, indent=2, default=str) + "\n")


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_gateway_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    gateway = create_gateway(config=config)

    try:
        if args.command == "get-transaction":
            transaction = gateway.reporting.get_transaction(args.payment_id)
            _print_json(dict(transaction.raw))
        else:
            records = gateway.reporting.query(
                args.start_date,
                args.end_date,
                args.start_row,
                args.end_row,
                *(args.criteria or ()),
            )
            _print_json([dict(record.raw) for record in records])
    except GatewayError as exc:
        logging.error("Request failed: %s", exc)
        return 1

    return 0


def main() -> None:
    sys.exit(run_cli())
