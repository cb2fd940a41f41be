import json
from decimal import Decimal

import pytest

from paypal_checkout.core.payloads import (
    build_order_request,
    capture_url,
    cents_to_decimal,
    ensure_trailing_slash,
    format_amount,
    parse_capture_request,
)


@pytest.mark.parametrize(
    "cents, expected",
    [
        (0, Decimal("0")),
        (1, Decimal("0.01")),
        (100, Decimal("1")),
        (1050, Decimal("10.5")),
        (1999, Decimal("19.99")),
        (99_999_999, Decimal("999999.99")),
    ],
)
def test_cents_to_decimal(cents, expected):
    assert cents_to_decimal(cents) == expected


def test_cents_to_decimal_is_exact_over_practical_range():
    for cents in list(range(0, 10_000)) + list(range(99_990_000, 100_000_000, 7)):
        value = cents_to_decimal(cents)
        assert value * 100 == cents
        assert value == value.quantize(Decimal("0.01"))


@pytest.mark.parametrize("cents, expected", [(1050, "10.50"), (100, "1.00"), (5, "0.05"), (0, "0.00")])
def test_format_amount(cents, expected):
    assert format_amount(cents) == expected


@pytest.mark.parametrize("bad", [-1, 10.5, "100", True, None])
def test_cents_must_be_a_non_negative_int(bad):
    with pytest.raises(ValueError):
        cents_to_decimal(bad)


def test_build_order_request():
    body = build_order_request(
        cents=1050,
        description="2 x Club-Mate",
        custom_id="user-42",
        invoice_id="INV-2023-0001",
    )

    assert body == {
        "intent": "CAPTURE",
        "purchase_units": [
            {
                "amount": {"currency_code": "EUR", "value": "10.50"},
                "description": "2 x Club-Mate",
                "custom_id": "user-42",
                "invoice_id": "INV-2023-0001",
            }
        ],
        "application_context": {"shipping_preference": "NO_SHIPPING"},
    }
    json.dumps(body)


def test_build_order_request_omits_empty_text_fields():
    unit = build_order_request(cents=100)["purchase_units"][0]

    assert unit == {"amount": {"currency_code": "EUR", "value": "1.00"}}


@pytest.mark.parametrize("field", ["description", "custom_id", "invoice_id"])
def test_text_fields_are_limited_to_127_characters(field):
    build_order_request(cents=1, **{field: "x" * 127})

    with pytest.raises(ValueError, match=field):
        build_order_request(cents=1, **{field: "x" * 128})


@pytest.mark.parametrize(
    "base",
    ["https://api.example.com/v2/orders", "https://api.example.com/v2/orders/"],
)
def test_capture_url_has_exactly_one_slash(base):
    assert (
        capture_url(base, "1AB23456CD789012E")
        == "https://api.example.com/v2/orders/1AB23456CD789012E/capture"
    )


def test_capture_url_quotes_the_order_id():
    assert capture_url("https://a/orders", "../x") == "https://a/orders/..%2Fx/capture"


def test_capture_url_requires_order_id():
    with pytest.raises(ValueError):
        capture_url("https://a/orders", "")


def test_ensure_trailing_slash():
    assert ensure_trailing_slash("https://a") == "https://a/"
    assert ensure_trailing_slash("https://a/") == "https://a/"


@pytest.mark.parametrize(
    "body",
    [
        b'{"orderID": "1AB23456CD789012E"}',
        '{"orderID": "1AB23456CD789012E"}',
        {"orderID": "1AB23456CD789012E"},
    ],
)
def test_parse_capture_request(body):
    assert parse_capture_request(body) == "1AB23456CD789012E"


@pytest.mark.parametrize("body", [b"{}", '{"orderID": ""}', "[]", "nope", {"orderID": 12}])
def test_parse_capture_request_rejects_bad_bodies(body):
    with pytest.raises(ValueError):
        parse_capture_request(body)
