"""
HTTP transport used by the capability accessors.

Anything with an ``execute(method, url, body, credentials)`` method returning
the raw response body can stand in for :class:`RequestsTransport`, which is
how tests and alternative HTTP stacks plug in.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol

import requests

from .errors import TransportError

__all__ = [
    "Credentials",
    "HttpMethod",
    "RequestsTransport",
    "Transport",
]

DEFAULT_TIMEOUT = 30


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Credentials:
    merchant_id: int
    passcode: str

    def __repr__(self) -> str:
        return f"Credentials(merchant_id={self.merchant_id}, passcode='***')"

    def authorization_header(self) -> str:
        token = f"{self.merchant_id}:{self.passcode}".encode("utf-8")
        return "Passcode " + base64.b64encode(token).decode("ascii")


class Transport(Protocol):
    def execute(
        self,
        method: HttpMethod,
        url: str,
        body: Optional[str] = None,
        credentials: Optional[Credentials] = None,
    ) -> str:
        ...


class RequestsTransport:
    """
    Default transport built on a :class:`requests.Session`.

    Responses with a status code of 400 or above are raised as
    :class:`TransportError` carrying the status and body.
    """

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def execute(
        self,
        method: HttpMethod,
        url: str,
        body: Optional[str] = None,
        credentials: Optional[Credentials] = None,
    ) -> str:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"
        if credentials is not None:
            headers["Authorization"] = credentials.authorization_header()

        verb = HttpMethod(method).value
        logging.debug("%s %s", verb, url)
        try:
            response = self.session.request(
                verb,
                url,
                data=body.encode("utf-8") if body is not None else None,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{verb} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise TransportError(
                f"Gateway responded with {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.text
