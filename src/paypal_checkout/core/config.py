"""
Configuration objects and helpers for the PayPal checkout client.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .environment import CONFIG_KEYS, merge_config_values
from .errors import ConfigCreatedError, ConfigError, MissingFieldError

__all__ = [
    "PaymentConfig",
    "create_placeholder_config",
    "load_payment_config",
]

PathLike = Union[str, "os.PathLike[str]"]


def _require(values: Mapping[str, Any], key: str) -> str:
    value = values.get(key)
    if value is None:
        raise MissingFieldError(key)
    if not isinstance(value, str):
        raise ConfigError(f"{key} in paypal config file must be a string")
    if not value:
        raise MissingFieldError(key)
    return value


@dataclass(frozen=True)
class PaymentConfig:
    oauth_api: str
    order_api: str
    client_id: str
    secret: str = field(repr=False)

    def __post_init__(self) -> None:
        values = (self.oauth_api, self.order_api, self.client_id, self.secret)
        for key, value in zip(CONFIG_KEYS, values):
            if not value:
                raise MissingFieldError(key)

    def to_mapping(self) -> Dict[str, str]:
        return {
            "oauth-api": self.oauth_api,
            "order-api": self.order_api,
            "client-id": self.client_id,
            "secret": self.secret,
        }

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PaymentConfig":
        return cls(
            oauth_api=_require(values, "oauth-api"),
            order_api=_require(values, "order-api"),
            client_id=_require(values, "client-id"),
            secret=_require(values, "secret"),
        )


def create_placeholder_config(path: PathLike) -> Path:
    """
    Write a config file with every key empty, readable only by its owner.

    The file must not exist yet; operators fill in the values by hand.
    """
    target = Path(path)
    data = json.dumps({key: "" for key in CONFIG_KEYS}, indent=2) + "\n"
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(data)
    # os.open honours the umask, which may only narrow the mode.
    os.chmod(target, 0o600)
    return target


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        create_placeholder_config(path)
        logging.warning("PayPal config %s did not exist; wrote an empty placeholder", path)
        raise ConfigCreatedError(str(path)) from None

    try:
        values = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"paypal config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(values, dict):
        raise ConfigError(f"paypal config file {path} must contain a JSON object")
    return values


def load_payment_config(
    path: PathLike,
    *,
    overrides: Optional[Mapping[str, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> PaymentConfig:
    """
    Load a :class:`PaymentConfig` from a JSON file.

    If the file does not exist an empty placeholder is created (mode ``0600``)
    and :class:`ConfigCreatedError` is raised so an operator can fill it in.
    ``PAYPAL_*`` variables from ``environ`` (default :data:`os.environ`) and
    then ``overrides`` are layered over the file values before validation.
    """
    file_values = _read_config_file(Path(path))
    values = merge_config_values(file_values, environ=environ, overrides=overrides)
    return PaymentConfig.from_mapping(values)
