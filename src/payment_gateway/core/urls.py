"""
URL templates for the gateway REST resources.

Templates carry three placeholders: ``{v}`` (API version), ``{p}``
(platform sub-domain) and ``{id}`` (resource id). Substitution is verbatim;
nothing is escaped.
"""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_PLATFORM, DEFAULT_VERSION, Configuration

__all__ = [
    "BASE_URL",
    "COMPLETE_PAYMENT_URL",
    "PAYMENTS_URL",
    "PAYMENT_URL",
    "PROFILES_URL",
    "PROFILE_URL",
    "REPORTS_URL",
    "RETURN_PAYMENT_URL",
    "VOID_PAYMENT_URL",
    "resolve_url",
]

BASE_URL = "https://{p}.api.na.bambora.com"

PAYMENTS_URL = BASE_URL + "/{v}/payments"
PAYMENT_URL = PAYMENTS_URL + "/{id}"
COMPLETE_PAYMENT_URL = PAYMENT_URL + "/completions"
RETURN_PAYMENT_URL = PAYMENT_URL + "/returns"
VOID_PAYMENT_URL = PAYMENT_URL + "/void"

PROFILES_URL = BASE_URL + "/{v}/profiles"
PROFILE_URL = PROFILES_URL + "/{id}"

REPORTS_URL = BASE_URL + "/{v}/reports"


def resolve_url(
    template: str,
    configuration: Configuration,
    resource_id: Optional[str] = None,
) -> str:
    """
    Fill ``template`` from ``configuration`` and an optional ``resource_id``.

    An empty version becomes ``v1`` and an empty platform becomes ``www``.
    ``resource_id`` is inserted as given, so an empty string yields an empty
    path segment. A template with an ``{id}`` placeholder requires one.
    """
    if resource_id is None and "{id}" in template:
        raise ValueError(f"URL template {template!r} needs a resource id")

    version = configuration.version or DEFAULT_VERSION
    platform = configuration.platform or DEFAULT_PLATFORM

    url = template.replace("{v}", "v" + version).replace("{p}", platform)
    if resource_id is not None:
        url = url.replace("{id}", resource_id)
    return url
