"""
Typed views of the JSON documents returned by PayPal.

Every ``from_response`` constructor tolerates missing keys and ignores unknown
ones, so additions to PayPal's schema do not break parsing. A key that is
present with the wrong type raises :class:`ResponseShapeError`. The untouched
payload stays available as ``raw``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional, Tuple

__all__ = [
    "Address",
    "AuthResult",
    "Capture",
    "CaptureResult",
    "Link",
    "Money",
    "OrderResult",
    "Payer",
    "PurchaseUnitResult",
    "ReceivableBreakdown",
    "ResponseShapeError",
    "SellerProtection",
    "Shipping",
]


class ResponseShapeError(ValueError):
    """A response field is present but does not have the documented type."""


def _mapping(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ResponseShapeError(f"{key} must be an object, got {value!r}")
    return value


def _items(payload: Dict[str, Any], key: str) -> Tuple[Dict[str, Any], ...]:
    value = payload.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ResponseShapeError(f"{key} must be a list of objects, got {value!r}")
    return tuple(value)


def _str(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ResponseShapeError(f"{key} must be a string, got {value!r}")
    return value


def _required_str(payload: Dict[str, Any], key: str) -> str:
    value = _str(payload, key)
    if not value:
        raise ResponseShapeError(f"{key} is missing")
    return value


def _int(payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResponseShapeError(f"{key} must be an integer, got {value!r}")
    return value


def _bool(payload: Dict[str, Any], key: str) -> bool:
    value = payload.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ResponseShapeError(f"{key} must be a boolean, got {value!r}")
    return value


def _timestamp(payload: Dict[str, Any], key: str) -> Optional[datetime]:
    value = _str(payload, key)
    if not value:
        return None
    try:
        # fromisoformat only learned the "Z" suffix in 3.11
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise ResponseShapeError(f"{key} is not an ISO 8601 timestamp: {value!r}") from exc


@dataclass(frozen=True)
class AuthResult:
    access_token: str = field(repr=False)
    token_type: str = ""
    expires_in: int = 0
    scope: str = ""
    app_id: str = ""
    nonce: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "AuthResult":
        return cls(
            access_token=_required_str(payload, "access_token"),
            token_type=_str(payload, "token_type"),
            expires_in=_int(payload, "expires_in"),
            scope=_str(payload, "scope"),
            app_id=_str(payload, "app_id"),
            nonce=_str(payload, "nonce"),
            raw=payload,
        )


@dataclass(frozen=True)
class Link:
    href: str
    rel: str
    method: str

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Link":
        return cls(href=_str(payload, "href"), rel=_str(payload, "rel"), method=_str(payload, "method"))

    @classmethod
    def parse_all(cls, payload: Dict[str, Any]) -> Tuple["Link", ...]:
        return tuple(cls.from_response(item) for item in _items(payload, "links"))


def _find_link(links: Iterable[Link], rel: str) -> Optional[str]:
    for link in links:
        if link.rel == rel:
            return link.href
    return None


@dataclass(frozen=True)
class Money:
    currency_code: str
    value: Optional[Decimal]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> Optional["Money"]:
        if not payload:
            return None
        raw_value = _str(payload, "value")
        try:
            value = Decimal(raw_value) if raw_value else None
        except InvalidOperation as exc:
            raise ResponseShapeError(f"value is not a decimal amount: {raw_value!r}") from exc
        if value is not None and not value.is_finite():
            raise ResponseShapeError(f"value is not a decimal amount: {raw_value!r}")
        return cls(currency_code=_str(payload, "currency_code"), value=value)


@dataclass(frozen=True)
class OrderResult:
    id: str
    status: str = ""
    links: Tuple[Link, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def approve_url(self) -> Optional[str]:
        """Where to send the buyer to approve the order, if PayPal told us."""
        return _find_link(self.links, "approve") or _find_link(self.links, "payer-action")

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "OrderResult":
        return cls(
            id=_required_str(payload, "id"),
            status=_str(payload, "status"),
            links=Link.parse_all(payload),
            raw=payload,
        )


@dataclass(frozen=True)
class SellerProtection:
    status: str = ""
    dispute_categories: Tuple[str, ...] = ()

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "SellerProtection":
        categories = payload.get("dispute_categories")
        if categories is None:
            categories = []
        if not isinstance(categories, list) or not all(isinstance(c, str) for c in categories):
            raise ResponseShapeError(f"dispute_categories must be a list of strings, got {categories!r}")
        return cls(
            status=_str(payload, "status"),
            dispute_categories=tuple(categories),
        )


@dataclass(frozen=True)
class ReceivableBreakdown:
    gross_amount: Optional[Money] = None
    paypal_fee: Optional[Money] = None
    net_amount: Optional[Money] = None

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "ReceivableBreakdown":
        return cls(
            gross_amount=Money.from_response(_mapping(payload, "gross_amount")),
            paypal_fee=Money.from_response(_mapping(payload, "paypal_fee")),
            net_amount=Money.from_response(_mapping(payload, "net_amount")),
        )


@dataclass(frozen=True)
class Capture:
    id: str
    status: str = ""
    amount: Optional[Money] = None
    final_capture: bool = False
    seller_protection: SellerProtection = SellerProtection()
    seller_receivable_breakdown: ReceivableBreakdown = ReceivableBreakdown()
    links: Tuple[Link, ...] = ()
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Capture":
        return cls(
            id=_str(payload, "id"),
            status=_str(payload, "status"),
            amount=Money.from_response(_mapping(payload, "amount")),
            final_capture=_bool(payload, "final_capture"),
            seller_protection=SellerProtection.from_response(_mapping(payload, "seller_protection")),
            seller_receivable_breakdown=ReceivableBreakdown.from_response(
                _mapping(payload, "seller_receivable_breakdown")
            ),
            links=Link.parse_all(payload),
            create_time=_timestamp(payload, "create_time"),
            update_time=_timestamp(payload, "update_time"),
        )


@dataclass(frozen=True)
class Address:
    address_line_1: str = ""
    admin_area_2: str = ""
    admin_area_1: str = ""
    postal_code: str = ""
    country_code: str = ""

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Address":
        return cls(
            address_line_1=_str(payload, "address_line_1"),
            admin_area_2=_str(payload, "admin_area_2"),
            admin_area_1=_str(payload, "admin_area_1"),
            postal_code=_str(payload, "postal_code"),
            country_code=_str(payload, "country_code"),
        )


@dataclass(frozen=True)
class Shipping:
    full_name: str = ""
    address: Address = Address()

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> Optional["Shipping"]:
        if not payload:
            return None
        return cls(
            full_name=_str(_mapping(payload, "name"), "full_name"),
            address=Address.from_response(_mapping(payload, "address")),
        )


@dataclass(frozen=True)
class PurchaseUnitResult:
    reference_id: str = ""
    shipping: Optional[Shipping] = None
    captures: Tuple[Capture, ...] = ()

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "PurchaseUnitResult":
        payments = _mapping(payload, "payments")
        return cls(
            reference_id=_str(payload, "reference_id"),
            shipping=Shipping.from_response(_mapping(payload, "shipping")),
            captures=tuple(Capture.from_response(item) for item in _items(payments, "captures")),
        )


@dataclass(frozen=True)
class Payer:
    given_name: str = ""
    surname: str = ""
    email_address: str = ""
    payer_id: str = ""
    country_code: str = ""

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> Optional["Payer"]:
        if not payload:
            return None
        name = _mapping(payload, "name")
        return cls(
            given_name=_str(name, "given_name"),
            surname=_str(name, "surname"),
            email_address=_str(payload, "email_address"),
            payer_id=_str(payload, "payer_id"),
            country_code=_str(_mapping(payload, "address"), "country_code"),
        )


@dataclass(frozen=True)
class CaptureResult:
    id: str
    status: str = ""
    purchase_units: Tuple[PurchaseUnitResult, ...] = ()
    payer: Optional[Payer] = None
    links: Tuple[Link, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def captures(self) -> Tuple[Capture, ...]:
        """All captures across purchase units, in response order."""
        return tuple(capture for unit in self.purchase_units for capture in unit.captures)

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "CaptureResult":
        return cls(
            id=_required_str(payload, "id"),
            status=_str(payload, "status"),
            purchase_units=tuple(
                PurchaseUnitResult.from_response(item) for item in _items(payload, "purchase_units")
            ),
            payer=Payer.from_response(_mapping(payload, "payer")),
            links=Link.parse_all(payload),
            raw=payload,
        )
