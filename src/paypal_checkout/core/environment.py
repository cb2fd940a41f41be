"""
Utilities for layering configuration values on top of the JSON config file.

The helpers are intentionally lightweight: they pick the ``PAYPAL_*`` keys out
of the process environment, allow callers to layer explicit overrides, and
return a plain ``dict`` keyed like the config file that can be fed into
:meth:`paypal_checkout.core.config.PaymentConfig.from_mapping`.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

__all__ = [
    "CONFIG_KEYS",
    "ENV_KEYS",
    "environment_overrides",
    "merge_config_values",
]

CONFIG_KEYS = ("oauth-api", "order-api", "client-id", "secret")

ENV_KEYS = {
    "oauth-api": "PAYPAL_OAUTH_API",
    "order-api": "PAYPAL_ORDER_API",
    "client-id": "PAYPAL_CLIENT_ID",
    "secret": "PAYPAL_SECRET",
}


def environment_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Return the config values set through ``PAYPAL_*`` environment variables.

    ``environ`` defaults to :data:`os.environ`. Empty variables are ignored so
    that an exported-but-blank variable does not hide the file value.
    """
    source = os.environ if environ is None else environ
    values: Dict[str, str] = {}
    for config_key, env_key in ENV_KEYS.items():
        value = source.get(env_key)
        if value:
            values[config_key] = value
    return values


def merge_config_values(
    file_values: Mapping[str, object],
    *,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, object]:
    """
    Layer file values, environment values and explicit overrides.

    ``overrides`` always win. Keys outside :data:`CONFIG_KEYS` are rejected so a
    typo in ``--set`` does not go unnoticed.
    """
    merged: Dict[str, object] = dict(file_values)
    merged.update(environment_overrides(environ))

    if overrides:
        unknown = sorted(set(overrides) - set(CONFIG_KEYS))
        if unknown:
            raise KeyError(f"Unknown config key(s): {', '.join(unknown)}")
        merged.update(overrides)

    return merged
