"""
Minimal script that uses the public API to fetch a transaction and run a report search.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta

from payment_gateway import ConfigError, GatewayError, create_gateway, load_gateway_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search recent transactions using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing GATEWAY_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=7,
        help="Size of the search window ending now (default: 7)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=100,
        help="Rows requested per search call (at most 1000)",
    )
    parser.add_argument(
        "--payment-id",
        help="Also fetch this transaction through the payments resource",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_gateway_config(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    gateway = create_gateway(config=config)
    end = datetime.now()
    start = end - timedelta(days=args.days)

    try:
        if args.payment_id:
            transaction = gateway.reporting.get_transaction(args.payment_id)
            logging.info("Transaction %s: %s %s", transaction.id, transaction.type, transaction.amount)

        start_row = 1
        while True:
            end_row = start_row + args.page_size - 1
            records = gateway.reporting.query(start, end, start_row, end_row)
            for record in records:
                logging.info("Record %s amount %s", record.id, record.amount)
            if len(records) < args.page_size:
                break
            start_row = end_row + 1
    except GatewayError as exc:
        logging.error("Request failed: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
