"""
Request builder shared by the payments, profiles and reporting accessors.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .codec import encode_json
from .config import Configuration
from .errors import MissingCredential
from .transport import Credentials, HttpMethod, RequestsTransport, Transport

__all__ = ["CapabilityAPI", "GatewayRequest"]


class GatewayRequest:
    """
    Pairs one capability's credentials with a transport and dispatches calls.

    The passcode is checked when the request is processed, so an accessor
    can be obtained before its key is set.
    """

    def __init__(
        self,
        capability: str,
        merchant_id: int,
        passcode: str,
        transport: Transport,
    ) -> None:
        self.capability = capability
        self.merchant_id = merchant_id
        self.passcode = passcode
        self.transport = transport

    def process(
        self,
        method: HttpMethod,
        url: str,
        body: Optional[Any] = None,
    ) -> str:
        if not self.passcode:
            raise MissingCredential(self.capability)

        encoded = encode_json(body) if body is not None else None
        credentials = Credentials(merchant_id=self.merchant_id, passcode=self.passcode)
        logging.info("Sending %s request to %s", HttpMethod(method).value, url)
        return self.transport.execute(method, url, encoded, credentials)


class CapabilityAPI:
    """
    Common state of a capability accessor: the shared configuration and the
    transport. Subclasses set ``capability`` and ``passcode_field``, the
    :class:`Configuration` attribute holding their passcode.
    """

    capability = ""
    passcode_field = ""

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        *,
        transport: Optional[Transport] = None,
    ) -> None:
        self.configuration = configuration if configuration is not None else Configuration()
        self.transport: Transport = transport if transport is not None else RequestsTransport()

    def _request(self) -> GatewayRequest:
        return GatewayRequest(
            capability=self.capability,
            merchant_id=self.configuration.merchant_id,
            passcode=getattr(self.configuration, self.passcode_field),
            transport=self.transport,
        )
