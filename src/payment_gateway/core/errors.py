"""
Exception hierarchy raised by the gateway client.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "DecodeError",
    "GatewayError",
    "InvalidArgument",
    "MissingCredential",
    "TransportError",
]


class GatewayError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(GatewayError, ValueError):
    """
    Raised before any network call when a request parameter is rejected.

    ``check`` names the rule that failed, e.g. ``"date-range"``.
    """

    def __init__(self, check: str, message: str) -> None:
        super().__init__(message)
        self.check = check


class MissingCredential(GatewayError):
    """Raised when a capability is used while its passcode is empty."""

    def __init__(self, capability: str) -> None:
        super().__init__(f"No API passcode configured for the {capability} API")
        self.capability = capability


class TransportError(GatewayError):
    """Connectivity or HTTP-level failure reported by the transport."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(GatewayError):
    """Raised when a response body cannot be parsed into the expected shape."""

    def __init__(self, message: str, *, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body
