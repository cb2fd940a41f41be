import json
from unittest.mock import Mock

import pytest
import requests

from paypal_checkout import PaymentConfig
from paypal_checkout.core.responses import AuthResult


def _make_response(status_code, body=None, reason=None):
    """Build a real ``requests.Response`` so ``.json()`` behaves like the wire."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def config():
    return PaymentConfig(
        oauth_api="https://api.example.com/v1/oauth2/token",
        order_api="https://api.example.com/v2/checkout/orders",
        client_id="client-123",
        secret="s3cr3t",
    )


@pytest.fixture
def auth():
    return AuthResult(access_token="A21AAFEpH4PsADK7qSS7pSRsgzfENtu", token_type="Bearer", expires_in=32400)


@pytest.fixture
def session():
    return Mock(spec=requests.Session)
