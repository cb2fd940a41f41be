"""
Helpers for constructing the requests sent to the PayPal orders API.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, Mapping, Union
from urllib.parse import quote

__all__ = [
    "CAPTURE_ACKNOWLEDGEMENT",
    "CURRENCY_CODE",
    "MAX_TEXT_LENGTH",
    "build_order_request",
    "build_purchase_unit",
    "capture_url",
    "cents_to_decimal",
    "ensure_trailing_slash",
    "format_amount",
    "parse_capture_request",
]

CURRENCY_CODE = "EUR"

# PayPal limits description, custom_id and invoice_id to 127 characters.
MAX_TEXT_LENGTH = 127

# What the browser receives once the capture went through.
CAPTURE_ACKNOWLEDGEMENT = True


def cents_to_decimal(cents: int) -> Decimal:
    """
    Convert an amount of euro cents into an exact major-unit decimal.

    ``cents_to_decimal(1050) == Decimal("10.5")``.
    """
    if isinstance(cents, bool) or not isinstance(cents, int):
        raise ValueError(f"Amount must be an integer number of cents, got {cents!r}")
    if cents < 0:
        raise ValueError("Amount must not be negative")
    return Decimal(cents).scaleb(-2)


def format_amount(cents: int) -> str:
    """Render ``cents`` the way PayPal expects amounts: ``"10.50"``."""
    return f"{cents_to_decimal(cents):.2f}"


def _check_text(name: str, value: str) -> None:
    if len(value) > MAX_TEXT_LENGTH:
        raise ValueError(f"{name} must be at most {MAX_TEXT_LENGTH} characters, got {len(value)}")


def build_purchase_unit(
    *,
    cents: int,
    description: str = "",
    custom_id: str = "",
    invoice_id: str = "",
) -> Dict[str, Any]:
    """
    Build a single purchase unit. Empty text fields are left out since PayPal
    rejects empty strings for them.
    """
    unit: Dict[str, Any] = {
        "amount": {
            "currency_code": CURRENCY_CODE,
            "value": format_amount(cents),
        },
    }
    for name, value in (
        ("description", description),
        ("custom_id", custom_id),
        ("invoice_id", invoice_id),
    ):
        _check_text(name, value)
        if value:
            unit[name] = value
    return unit


def build_order_request(
    *,
    cents: int,
    description: str = "",
    custom_id: str = "",
    invoice_id: str = "",
) -> Dict[str, Any]:
    """Build the JSON body for ``POST /v2/checkout/orders``."""
    return {
        "intent": "CAPTURE",
        "purchase_units": [
            build_purchase_unit(
                cents=cents,
                description=description,
                custom_id=custom_id,
                invoice_id=invoice_id,
            )
        ],
        # We never send shipping information, so PayPal must not ask for it.
        "application_context": {"shipping_preference": "NO_SHIPPING"},
    }


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def capture_url(order_api: str, order_id: str) -> str:
    if not order_id:
        raise ValueError("order_id must not be empty")
    return f"{ensure_trailing_slash(order_api)}{quote(order_id, safe='')}/capture"


def parse_capture_request(body: Union[bytes, str, Mapping[str, Any]]) -> str:
    """
    Extract the order id from the browser's capture request ``{"orderID": ...}``.
    """
    if isinstance(body, (bytes, str)):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Capture request is not valid JSON: {exc}") from exc

    if not isinstance(body, Mapping):
        raise ValueError("Capture request must be a JSON object")

    order_id = body.get("orderID")
    if not isinstance(order_id, str) or not order_id:
        raise ValueError("Capture request is missing orderID")
    return order_id
