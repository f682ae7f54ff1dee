"""Shared fixtures: a recording transport and a configured gateway."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from payment_gateway import Gateway
from payment_gateway.core.transport import Credentials, HttpMethod


@dataclass
class RecordedCall:
    method: HttpMethod
    url: str
    body: Optional[str]
    credentials: Optional[Credentials]


@dataclass
class StubTransport:
    """Returns a canned body and remembers every call."""

    response: str = "{}"
    calls: List[RecordedCall] = field(default_factory=list)

    def execute(self, method, url, body=None, credentials=None):
        self.calls.append(RecordedCall(method, url, body, credentials))
        return self.response

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def gateway(stub_transport: StubTransport) -> Gateway:
    gw = Gateway(merchant_id=300200578, transport=stub_transport)
    gw.payments_api_key = "pay-key"
    gw.profiles_api_key = "profile-key"
    gw.reporting_api_key = "report-key"
    return gw
