"""
Connection settings shared by every capability of a :class:`Gateway`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

__all__ = [
    "ConfigError",
    "Configuration",
    "DEFAULT_PLATFORM",
    "DEFAULT_VERSION",
    "load_gateway_config",
]

DEFAULT_VERSION = "1"
DEFAULT_PLATFORM = "www"

_PARAMETER_TO_ENV_KEY = {
    "merchant_id": "GATEWAY_MERCHANT_ID",
    "payments_api_key": "GATEWAY_PAYMENTS_API_KEY",
    "profiles_api_key": "GATEWAY_PROFILES_API_KEY",
    "reporting_api_key": "GATEWAY_REPORTING_API_KEY",
    "api_version": "GATEWAY_API_VERSION",
    "platform": "GATEWAY_PLATFORM",
}

_ENV_KEYS = frozenset(_PARAMETER_TO_ENV_KEY.values())


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _parse_merchant_id(raw: str) -> int:
    value = raw.strip()
    if not value:
        return 0
    try:
        merchant_id = int(value)
    except ValueError as exc:
        raise ConfigError(
            f"GATEWAY_MERCHANT_ID must be an integer, got '{raw}'"
        ) from exc
    if merchant_id < 0:
        raise ConfigError("GATEWAY_MERCHANT_ID must not be negative")
    return merchant_id


def _optional(values: Mapping[str, str], key: str) -> Optional[str]:
    value = values.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _read_env_file(path: Path) -> Dict[str, str]:
    """Return the ``GATEWAY_*`` assignments found in a .env file, if it exists."""
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for lineno, raw_line in enumerate(data.splitlines(), start=1):
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            raise ConfigError(f"{path}:{lineno}: expected KEY=VALUE, got '{raw_line}'")
        key, value = (part.strip() for part in line.split("=", 1))
        if key not in _ENV_KEYS:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def _gather_settings(
    *,
    env_file: Optional[str],
    base: Optional[Mapping[str, str]],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    """
    Collect the ``GATEWAY_*`` settings from their sources.

    Precedence, lowest first: the .env file, ``base`` (the process
    environment by default), then ``overrides``.
    """
    settings: Dict[str, str] = {}
    if env_file is not None:
        settings.update(_read_env_file(Path(env_file)))

    source = os.environ if base is None else base
    settings.update({key: value for key, value in source.items() if key in _ENV_KEYS})

    for key, value in overrides.items():
        if key not in _ENV_KEYS:
            raise ConfigError(f"Unknown setting '{key}'")
        settings[key] = value
    return settings


@dataclass
class Configuration:
    """
    Merchant identity, per-capability passcodes, API version and platform.

    Instances are mutable and shared by reference: every capability accessor
    handed out by one :class:`~payment_gateway.core.gateway.Gateway` points at
    the same object, so a change made here is seen by all of them.
    """

    merchant_id: int = 0
    payments_api_passcode: str = ""
    profiles_api_passcode: str = ""
    reporting_api_passcode: str = ""
    version: Optional[str] = None
    platform: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "Configuration":
        return cls(
            merchant_id=_parse_merchant_id(values.get("GATEWAY_MERCHANT_ID", "")),
            payments_api_passcode=values.get("GATEWAY_PAYMENTS_API_KEY", "").strip(),
            profiles_api_passcode=values.get("GATEWAY_PROFILES_API_KEY", "").strip(),
            reporting_api_passcode=values.get("GATEWAY_REPORTING_API_KEY", "").strip(),
            version=_optional(values, "GATEWAY_API_VERSION"),
            platform=_optional(values, "GATEWAY_PLATFORM"),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        merchant_id: Optional[int | str] = None,
        payments_api_key: Optional[str] = None,
        profiles_api_key: Optional[str] = None,
        reporting_api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> "Configuration":
        explicit: Dict[str, Any] = {
            "merchant_id": merchant_id,
            "payments_api_key": payments_api_key,
            "profiles_api_key": profiles_api_key,
            "reporting_api_key": reporting_api_key,
            "api_version": api_version,
            "platform": platform,
        }
        merged_overrides = dict(overrides or {})
        for key, value in explicit.items():
            if value is not None:
                merged_overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)

        return cls.from_mapping(
            _gather_settings(env_file=env_file, base=base, overrides=merged_overrides)
        )


def load_gateway_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[int | str] = None,
    payments_api_key: Optional[str] = None,
    profiles_api_key: Optional[str] = None,
    reporting_api_key: Optional[str] = None,
    api_version: Optional[str] = None,
    platform: Optional[str] = None,
) -> Configuration:
    """
    Convenience wrapper that mirrors :meth:`Configuration.from_env`.

    Settings can come from environment variables, a ``.env`` file, direct
    keyword arguments, or any combination of the three.
    """
    return Configuration.from_env(
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
