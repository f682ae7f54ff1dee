"""
Single entry point to the payments, profiles and reporting APIs.
"""

from __future__ import annotations

from typing import Optional

from .config import Configuration
from .payments import PaymentsAPI
from .profiles import ProfilesAPI
from .reporting import ReportingAPI
from .transport import Transport

__all__ = ["Gateway"]


class Gateway:
    """
    Owns one :class:`Configuration` and hands out the capability accessors.

    Each API needs its own passcode, issued in the merchant back office. Set
    ``merchant_id`` and the passcode of every API you plan to call.

    ``merchant_id`` and ``api_version`` seed the configuration the first time
    :attr:`configuration` (or any passcode or API property) is read. From then
    on the configuration is the source of truth: later assignments to those
    two attributes are ignored, so change ``gateway.configuration`` directly.

    A gateway is not thread-safe. Create one instance per thread.
    """

    def __init__(
        self,
        *,
        merchant_id: int = 0,
        api_version: Optional[str] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self.merchant_id = merchant_id
        self.api_version = api_version
        self.transport = transport
        self._configuration: Optional[Configuration] = None
        self._payments: Optional[PaymentsAPI] = None
        self._profiles: Optional[ProfilesAPI] = None
        self._reporting: Optional[ReportingAPI] = None

    @classmethod
    def from_config(
        cls,
        config: Configuration,
        *,
        transport: Optional[Transport] = None,
    ) -> "Gateway":
        """Build a gateway around an existing configuration."""
        gateway = cls(
            merchant_id=config.merchant_id,
            api_version=config.version,
            transport=transport,
        )
        gateway._configuration = config
        return gateway

    @property
    def configuration(self) -> Configuration:
        if self._configuration is None:
            self._configuration = Configuration(
                merchant_id=self.merchant_id,
                version=self.api_version,
            )
        return self._configuration

    def _attach(self, api):
        api.configuration = self.configuration
        if self.transport is not None:
            api.transport = self.transport
        return api

    @property
    def payments(self) -> PaymentsAPI:
        if self._payments is None:
            self._payments = PaymentsAPI(self.configuration, transport=self.transport)
        return self._attach(self._payments)

    @property
    def profiles(self) -> ProfilesAPI:
        if self._profiles is None:
            self._profiles = ProfilesAPI(self.configuration, transport=self.transport)
        return self._attach(self._profiles)

    @property
    def reporting(self) -> ReportingAPI:
        if self._reporting is None:
            self._reporting = ReportingAPI(self.configuration, transport=self.transport)
        return self._attach(self._reporting)

    @property
    def payments_api_key(self) -> str:
        return self.configuration.payments_api_passcode

    @payments_api_key.setter
    def payments_api_key(self, value: str) -> None:
        self.configuration.payments_api_passcode = value

    @property
    def profiles_api_key(self) -> str:
        return self.configuration.profiles_api_passcode

    @profiles_api_key.setter
    def profiles_api_key(self, value: str) -> None:
        self.configuration.profiles_api_passcode = value

    @property
    def reporting_api_key(self) -> str:
        return self.configuration.reporting_api_passcode

    @reporting_api_key.setter
    def reporting_api_key(self, value: str) -> None:
        self.configuration.reporting_api_passcode = value
