"""
Exception types raised by the PayPal checkout helpers.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "ConfigCreatedError",
    "ConfigError",
    "DecodeError",
    "MissingFieldError",
    "PaymentError",
    "TransportError",
    "UnexpectedStatusError",
]


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


class ConfigCreatedError(ConfigError):
    """Raised after an empty placeholder config file was written."""

    def __init__(self, path: str) -> None:
        super().__init__(f"created empty config file: {path}")
        self.path = path


class MissingFieldError(ConfigError):
    def __init__(self, field: str) -> None:
        super().__init__(f"missing {field} in paypal config file")
        self.field = field


class PaymentError(RuntimeError):
    """Base class for failures talking to the PayPal API."""


class TransportError(PaymentError):
    """The HTTP exchange could not be completed (DNS, TLS, timeout, reset)."""


class UnexpectedStatusError(PaymentError):
    """PayPal answered with a status code other than the expected one."""

    def __init__(
        self,
        operation: str,
        status_code: int,
        status_line: str,
        body: str,
        *,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(f"error {operation}: {status_line}: {body}")
        self.operation = operation
        self.status_code = status_code
        self.status_line = status_line
        self.body = body
        self.url = url


class DecodeError(PaymentError):
    """The response body was not the JSON object we expected."""
