"""
HTTP client helpers for the PayPal OAuth and orders APIs.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

import requests

from .config import PaymentConfig
from .errors import DecodeError, TransportError, UnexpectedStatusError
from .payloads import build_order_request, capture_url, parse_capture_request
from .responses import AuthResult, CaptureResult, OrderResult, ResponseShapeError

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "PaymentClient",
    "authenticate",
    "capture_order",
    "create_order",
]

DEFAULT_TIMEOUT_SECONDS = 10.0

T = TypeVar("T")


def _status_line(response: requests.Response) -> str:
    if response.reason:
        return f"{response.status_code} {response.reason}"
    return str(response.status_code)


def _bearer_headers(auth: AuthResult) -> Dict[str, str]:
    if auth is None or not auth.access_token:
        raise ValueError("A non-empty access token is required")
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {auth.access_token}",
        "Content-Type": "application/json",
    }


def _post(
    session: requests.Session,
    url: str,
    *,
    operation: str,
    expected_status: int,
    timeout: float,
    **kwargs: Any,
) -> Dict[str, Any]:
    try:
        response = session.post(url, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        raise TransportError(f"error {operation}: request to {url} failed: {exc}") from exc

    logging.debug("PayPal responded to %s with %s", operation, response.status_code)
    if response.status_code != expected_status:
        raise UnexpectedStatusError(
            operation,
            response.status_code,
            _status_line(response),
            response.text,
            url=url,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(
            f"error {operation}: failed to parse JSON from {url}: {response.text}"
        ) from exc
    if not isinstance(payload, dict):
        raise DecodeError(f"error {operation}: expected a JSON object from {url}, got {payload!r}")
    return payload


def _decode(parse: Callable[[Dict[str, Any]], T], payload: Dict[str, Any], *, operation: str) -> T:
    try:
        return parse(payload)
    except ResponseShapeError as exc:
        raise DecodeError(f"error {operation}: unexpected response shape: {exc}") from exc


def authenticate(
    session: requests.Session,
    config: PaymentConfig,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> AuthResult:
    """Exchange the client credentials for an access token."""
    logging.info("Requesting PayPal access token from %s", config.oauth_api)
    payload = _post(
        session,
        config.oauth_api,
        operation="getting auth",
        expected_status=200,
        timeout=timeout,
        data={"grant_type": "client_credentials"},
        auth=(config.client_id, config.secret),
        headers={"Accept": "application/json"},
    )
    return _decode(AuthResult.from_response, payload, operation="getting auth")


def create_order(
    session: requests.Session,
    config: PaymentConfig,
    auth: AuthResult,
    *,
    description: str,
    custom_id: str,
    invoice_id: str,
    cents: int,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> OrderResult:
    """Set up a transaction for ``cents`` euro cents."""
    headers = _bearer_headers(auth)
    body = build_order_request(
        cents=cents,
        description=description,
        custom_id=custom_id,
        invoice_id=invoice_id,
    )
    logging.info("Creating PayPal order for %s cents at %s", cents, config.order_api)
    payload = _post(
        session,
        config.order_api,
        operation="doing order",
        expected_status=201,
        timeout=timeout,
        json=body,
        headers=headers,
    )
    return _decode(OrderResult.from_response, payload, operation="doing order")


def capture_order(
    session: requests.Session,
    config: PaymentConfig,
    auth: AuthResult,
    order_id: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> CaptureResult:
    """Capture the funds of an order the buyer has approved."""
    headers = _bearer_headers(auth)
    url = capture_url(config.order_api, order_id)
    logging.info("Capturing PayPal order %s", order_id)
    payload = _post(
        session,
        url,
        operation="capturing",
        expected_status=201,
        timeout=timeout,
        headers=headers,
    )
    return _decode(CaptureResult.from_response, payload, operation="capturing")


class PaymentClient:
    """
    Thin convenience wrapper around the PayPal endpoints.

    The client keeps no state between calls besides the session's connection
    pool, so one instance may be shared between threads.
    """

    def __init__(
        self,
        config: PaymentConfig,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.timeout = timeout

    def authenticate(self) -> AuthResult:
        return authenticate(self.session, self.config, timeout=self.timeout)

    def create_order(
        self,
        auth: AuthResult,
        *,
        description: str,
        custom_id: str,
        invoice_id: str,
        cents: int,
    ) -> OrderResult:
        return create_order(
            self.session,
            self.config,
            auth,
            description=description,
            custom_id=custom_id,
            invoice_id=invoice_id,
            cents=cents,
            timeout=self.timeout,
        )

    def capture_order(self, auth: AuthResult, order_id: str) -> CaptureResult:
        return capture_order(self.session, self.config, auth, order_id, timeout=self.timeout)

    def capture_request(self, auth: AuthResult, body: Mapping[str, Any] | bytes | str) -> CaptureResult:
        """
        Capture the order named in a browser request body ``{"orderID": ...}``.
        """
        return self.capture_order(auth, parse_capture_request(body))
