"""
Command-line interface for exercising the PayPal checkout calls.
"""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Sequence, Tuple

import requests

from .api import default_config_path
from .core.client import PaymentClient
from .core.config import create_placeholder_config, load_payment_config
from .core.errors import ConfigError, PaymentError
from .core.responses import CaptureResult, OrderResult


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _config_override(value: str) -> Tuple[str, str]:
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


def _non_negative_int(value: str) -> int:
    try:
        cents = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a whole number of cents, got '{value}'") from exc
    if cents < 0:
        raise argparse.ArgumentTypeError("Amount must not be negative")
    return cents


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paypal-checkout",
        description="Run single PayPal checkout calls against the configured API",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the JSON config file (default: $PAYPAL_CONFIG or paypal.json)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_config_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override a config value (e.g. order-api=...) without editing the file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("init", help="Write an empty config file to fill in")
    commands.add_parser("token", help="Check that the credentials yield an access token")

    order = commands.add_parser("create-order", help="Create an order awaiting buyer approval")
    order.add_argument("--cents", type=_non_negative_int, required=True, help="Amount in euro cents")
    order.add_argument("--description", default="", help="Purchase description shown to the buyer")
    order.add_argument("--custom-id", default="", help="Your reference, used for reconciliation")
    order.add_argument("--invoice-id", default="", help="Your invoice number")

    capture = commands.add_parser("capture", help="Capture an approved order")
    capture.add_argument("order_id", help="PayPal order id, e.g. 1AB23456CD789012E")
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    config_path = args.config or default_config_path()

    if args.command == "init":
        try:
            create_placeholder_config(config_path)
        except FileExistsError:
            logging.error("Config file %s already exists", config_path)
            return 1
        except OSError as exc:
            logging.error("Could not write config file %s: %s", config_path, exc)
            return 1
        logging.info("Wrote empty config file %s; fill in the values and retry", config_path)
        return 0

    overrides = _collect_overrides(args.set or ())
    try:
        config = load_payment_config(config_path, overrides=overrides)
    except (KeyError, ConfigError, OSError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = PaymentClient(config, session=requests.Session())

    try:
        auth = client.authenticate()
        if args.command == "token":
            logging.info(
                "Obtained %s token for app %s, valid for %s seconds",
                auth.token_type,
                auth.app_id,
                auth.expires_in,
            )
            return 0

        if args.command == "create-order":
            order = client.create_order(
                auth,
                description=args.description,
                custom_id=args.custom_id,
                invoice_id=args.invoice_id,
                cents=args.cents,
            )
            return _handle_order(order)

        return _handle_capture(client.capture_order(auth, args.order_id))
    except (PaymentError, ValueError) as exc:
        logging.error("PayPal request failed: %s", exc)
        return 1


def _handle_order(order: OrderResult) -> int:
    logging.info("Created order %s with status %s", order.id, order.status)
    if order.approve_url:
        logging.info("Buyer approval URL: %s", order.approve_url)
    return 0


def _handle_capture(result: CaptureResult) -> int:
    logging.info("Order %s is %s", result.id, result.status)
    for capture in result.captures:
        breakdown = capture.seller_receivable_breakdown
        logging.info(
            "Capture %s %s: gross %s, fee %s, net %s",
            capture.id,
            capture.status,
            breakdown.gross_amount and breakdown.gross_amount.value,
            breakdown.paypal_fee and breakdown.paypal_fee.value,
            breakdown.net_amount and breakdown.net_amount.value,
        )
    if result.status != "COMPLETED":
        logging.error(
            "Capture of order %s did not complete: status %s, captures %s",
            result.id,
            result.status,
            ", ".join(f"{capture.id}={capture.status}" for capture in result.captures) or "none",
        )
        return 1
    return 0
