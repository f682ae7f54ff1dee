"""
Public, high-level helpers for talking to the payment gateway.
"""

from __future__ import annotations

from datetime import date
from typing import List, Mapping, Optional

from .core.config import ConfigError, Configuration, load_gateway_config
from .core.gateway import Gateway
from .core.models import Criteria, Transaction, TransactionRecord
from .core.transport import Transport

__all__ = [
    "ConfigError",
    "create_gateway",
    "get_transaction",
    "load_gateway_config",
    "query_transactions",
]


def _resolve_config(
    config: Optional[Configuration],
    *,
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    merchant_id: Optional[int | str],
    payments_api_key: Optional[str],
    profiles_api_key: Optional[str],
    reporting_api_key: Optional[str],
    api_version: Optional[str],
    platform: Optional[str],
) -> Configuration:
    extras = (
        overrides,
        base,
        merchant_id,
        payments_api_key,
        profiles_api_key,
        reporting_api_key,
        api_version,
        platform,
    )
    if config is not None:
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built Configuration or individual parameters, not both."
            )
        return config
    return load_gateway_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        merchant_id=merchant_id,
        payments_api_key=payments_api_key,
        profiles_api_key=profiles_api_key,
        reporting_api_key=reporting_api_key,
        api_version=api_version,
        platform=platform,
    )


def create_gateway(
    *,
    config: Optional[Configuration] = None,
    transport: Optional[Transport] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[int | str] = None,
    payments_api_key: Optional[str] = None,
    profiles_api_key: Optional[str] = None,
    reporting_api_key: Optional[str] = None,
    api_version: Optional[str] = None,
    platform: Optional[str] = None,
) -> Gateway:
    """
    Construct a :class:`Gateway`.

    Callers can either supply a ready-made :class:`Configuration` or let the
    helper assemble one from environment data and keyword arguments.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        merchant_id=merchant_id,
        payments_api_key=payments_api_key,
        profiles_api_key=profiles_api_key,
        reporting_api_key=reporting_api_key,
        api_version=api_version,
        platform=platform,
    )
    return Gateway.from_config(cfg, transport=transport)


def get_transaction(
    payment_id: str,
    *,
    config: Optional[Configuration] = None,
    transport: Optional[Transport] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
) -> Transaction:
    """Look up one transaction with a throwaway gateway."""
    gateway = create_gateway(
        config=config,
        transport=transport,
        env_file=env_file,
        overrides=overrides,
    )
    return gateway.reporting.get_transaction(payment_id)


def query_transactions(
    start_date: date,
    end_date: date,
    start_row: int = 1,
    end_row: int = 1000,
    *criteria: Criteria,
    config: Optional[Configuration] = None,
    transport: Optional[Transport] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
) -> List[TransactionRecord]:
    """Run a single reporting search with a throwaway gateway."""
    gateway = create_gateway(
        config=config,
        transport=transport,
        env_file=env_file,
        overrides=overrides,
    )
    return gateway.reporting.query(start_date, end_date, start_row, end_row, *criteria)
