"""
Public, high-level helpers for running a PayPal checkout from a web backend.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional, Union

import requests

from .core.client import (
    DEFAULT_TIMEOUT_SECONDS,
    PaymentClient,
    authenticate,
    capture_order,
    create_order,
)
from .core.config import PaymentConfig, create_placeholder_config, load_payment_config
from .core.errors import (
    ConfigCreatedError,
    ConfigError,
    DecodeError,
    MissingFieldError,
    PaymentError,
    TransportError,
    UnexpectedStatusError,
)
from .core.payloads import CAPTURE_ACKNOWLEDGEMENT, cents_to_decimal, parse_capture_request
from .core.responses import AuthResult, CaptureResult, OrderResult

__all__ = [
    "AuthResult",
    "CAPTURE_ACKNOWLEDGEMENT",
    "CaptureResult",
    "ConfigCreatedError",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DecodeError",
    "MissingFieldError",
    "OrderResult",
    "PaymentClient",
    "PaymentConfig",
    "PaymentError",
    "TransportError",
    "UnexpectedStatusError",
    "authenticate",
    "capture_checkout_order",
    "capture_order",
    "cents_to_decimal",
    "create_checkout_order",
    "create_order",
    "create_payment_client",
    "create_placeholder_config",
    "default_config_path",
    "load_payment_config",
    "parse_capture_request",
]

DEFAULT_CONFIG_PATH = "paypal.json"


def default_config_path() -> str:
    """``$PAYPAL_CONFIG`` if set, else ``paypal.json`` in the working directory."""
    return os.environ.get("PAYPAL_CONFIG") or DEFAULT_CONFIG_PATH


def create_payment_client(
    *,
    config: Optional[PaymentConfig] = None,
    session: Optional[requests.Session] = None,
    config_path: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> PaymentClient:
    """
    Construct a :class:`PaymentClient`.

    Callers can either supply a ready-made :class:`PaymentConfig` or let the
    helper load one from ``config_path`` (default :func:`default_config_path`).
    """
    if config is not None:
        extras = (config_path, overrides, environ)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built PaymentConfig or loading parameters, not both."
            )
        cfg = config
    else:
        cfg = load_payment_config(
            config_path or default_config_path(),
            overrides=overrides,
            environ=environ,
        )
    return PaymentClient(cfg, session=session, timeout=timeout)


def create_checkout_order(
    *,
    cents: int,
    description: str = "",
    custom_id: str = "",
    invoice_id: str = "",
    client: Optional[PaymentClient] = None,
    **client_kwargs: Any,
) -> OrderResult:
    """
    Authenticate and create an order in one go.

    ``client_kwargs`` are forwarded to :func:`create_payment_client` when no
    ``client`` is given.
    """
    if client is None:
        client = create_payment_client(**client_kwargs)
    elif client_kwargs:
        raise ValueError("Provide either a client or client parameters, not both.")
    auth = client.authenticate()
    return client.create_order(
        auth,
        description=description,
        custom_id=custom_id,
        invoice_id=invoice_id,
        cents=cents,
    )


def capture_checkout_order(
    order: Union[str, bytes, Mapping[str, Any]],
    *,
    client: Optional[PaymentClient] = None,
    **client_kwargs: Any,
) -> CaptureResult:
    """
    Authenticate and capture an approved order.

    ``order`` is either the PayPal order id or the browser's request body
    ``{"orderID": ...}`` (raw JSON or already decoded). Once this returns the
    caller answers the browser with :data:`CAPTURE_ACKNOWLEDGEMENT`.
    """
    if isinstance(order, str) and not order.lstrip().startswith("{"):
        order_id = order
    else:
        order_id = parse_capture_request(order)
    if not order_id:
        raise ValueError("order_id must not be empty")

    if client is None:
        client = create_payment_client(**client_kwargs)
    elif client_kwargs:
        raise ValueError("Provide either a client or client parameters, not both.")
    auth = client.authenticate()
    return client.capture_order(auth, order_id)
