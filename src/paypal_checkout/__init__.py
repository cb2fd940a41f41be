"""
Public facade for the PayPal checkout helper package.

The module intentionally re-exports the most useful pieces for integrators so
they can ``from paypal_checkout import ...`` without navigating the package.
"""

from .api import (
    DEFAULT_CONFIG_PATH,
    capture_checkout_order,
    create_checkout_order,
    create_payment_client,
    default_config_path,
)
from .core import (
    CAPTURE_ACKNOWLEDGEMENT,
    AuthResult,
    Capture,
    CaptureResult,
    ConfigCreatedError,
    ConfigError,
    DecodeError,
    Link,
    MissingFieldError,
    Money,
    OrderResult,
    PaymentClient,
    PaymentConfig,
    PaymentError,
    TransportError,
    UnexpectedStatusError,
    authenticate,
    build_order_request,
    capture_order,
    capture_url,
    cents_to_decimal,
    create_order,
    create_placeholder_config,
    load_payment_config,
    parse_capture_request,
)

__all__ = (
    "AuthResult",
    "CAPTURE_ACKNOWLEDGEMENT",
    "Capture",
    "CaptureResult",
    "ConfigCreatedError",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
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
    "capture_checkout_order",
    "capture_order",
    "capture_url",
    "cents_to_decimal",
    "create_checkout_order",
    "create_order",
    "create_payment_client",
    "create_placeholder_config",
    "default_config_path",
    "load_payment_config",
    "parse_capture_request",
)
