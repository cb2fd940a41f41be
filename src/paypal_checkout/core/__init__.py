"""
Core primitives that implement the PayPal checkout calls.
"""

from .client import (
    DEFAULT_TIMEOUT_SECONDS,
    PaymentClient,
    authenticate,
    capture_order,
    create_order,
)
from .config import PaymentConfig, create_placeholder_config, load_payment_config
from .environment import environment_overrides
from .errors import (
    ConfigCreatedError,
    ConfigError,
    DecodeError,
    MissingFieldError,
    PaymentError,
    TransportError,
    UnexpectedStatusError,
)
from .payloads import (
    CAPTURE_ACKNOWLEDGEMENT,
    build_order_request,
    capture_url,
    cents_to_decimal,
    parse_capture_request,
)
from .responses import AuthResult, Capture, CaptureResult, Link, Money, OrderResult

__all__ = [
    "AuthResult",
    "CAPTURE_ACKNOWLEDGEMENT",
    "Capture",
    "CaptureResult",
    "ConfigCreatedError",
    "ConfigError",
    "DEFAULT_TIMEOUT_SECONDS",
    "DecodeError",
    "Link",
    "MissingFieldError",
    "Money",
    "OrderResult",
    "PaymentClient",
    "PaymentConfig",
    "PaymentError",
    "TransportError",
    "UnexpectedStatusError",
    "authenticate",
    "build_order_request",
    "capture_order",
    "capture_url",
    "cents_to_decimal",
    "create_order",
    "create_placeholder_config",
    "environment_overrides",
    "load_payment_config",
    "parse_capture_request",
]
