"""
Minimal script that uses the public API to run a full checkout by hand.

It creates an order, prints the approval link for the buyer and, once the
order was approved in the browser, captures it.
"""

from __future__ import annotations

import argparse
import logging
import sys

from paypal_checkout import (
    ConfigError,
    PaymentError,
    create_payment_client,
    default_config_path,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create and capture a PayPal order")
    parser.add_argument(
        "--config",
        default=default_config_path(),
        help="Path to the JSON config file",
    )
    parser.add_argument("--cents", type=int, default=100, help="Amount in euro cents (default: 100)")
    parser.add_argument("--description", default="Test purchase", help="Purchase description")
    parser.add_argument("--custom-id", default="", help="Your reconciliation reference")
    parser.add_argument("--invoice-id", default="", help="Your invoice number")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_payment_client(config_path=args.config)
    except (KeyError, ConfigError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        auth = client.authenticate()
        order = client.create_order(
            auth,
            description=args.description,
            custom_id=args.custom_id,
            invoice_id=args.invoice_id,
            cents=args.cents,
        )
    except (PaymentError, ValueError) as exc:
        logging.error("Creating the order failed: %s", exc)
        return 1

    print(f"Approve order {order.id} at: {order.approve_url}")
    input("Press Enter once the order was approved... ")

    try:
        # Tokens are short-lived; the buyer may have taken a while.
        result = client.capture_order(client.authenticate(), order.id)
    except PaymentError as exc:
        logging.error("Capture failed: %s", exc)
        return 1

    for capture in result.captures:
        logging.info(
            "Captured %s (%s), keep this id for reconciliation",
            capture.id,
            capture.amount,
        )
    return 0 if result.status == "COMPLETED" else 1


if __name__ == "__main__":
    sys.exit(main())
