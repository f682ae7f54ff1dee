"""
Payments capability: create, fetch, complete, return and void payments.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping

from .codec import decode_object
from .models import Transaction
from .request import CapabilityAPI
from .transport import HttpMethod
from .urls import (
    COMPLETE_PAYMENT_URL,
    PAYMENTS_URL,
    PAYMENT_URL,
    RETURN_PAYMENT_URL,
    VOID_PAYMENT_URL,
    resolve_url,
)

__all__ = ["PaymentsAPI"]


class PaymentsAPI(CapabilityAPI):
    capability = "payments"
    passcode_field = "payments_api_passcode"

    def _send(self, method: HttpMethod, url: str, body: Any = None) -> Transaction:
        response = self._request().process(method, url, body)
        return Transaction.from_dict(decode_object(response))

    def make_payment(self, payment: Mapping[str, Any]) -> Transaction:
        """
        Submit a payment or pre-authorization.

        ``payment`` is sent as-is; set ``"complete": False`` for a
        pre-authorization that is finished later with :meth:`complete_pre_auth`.
        """
        url = resolve_url(PAYMENTS_URL, self.configuration)
        return self._send(HttpMethod.POST, url, dict(payment))

    def get_payment(self, payment_id: str) -> Transaction:
        url = resolve_url(PAYMENT_URL, self.configuration, payment_id)
        return self._send(HttpMethod.GET, url)

    def complete_pre_auth(self, payment_id: str, amount: Decimal | float) -> Transaction:
        url = resolve_url(COMPLETE_PAYMENT_URL, self.configuration, payment_id)
        logging.info("Completing pre-authorization %s for %s", payment_id, amount)
        return self._send(HttpMethod.POST, url, {"amount": amount})

    def return_payment(self, payment_id: str, amount: Decimal | float) -> Transaction:
        url = resolve_url(RETURN_PAYMENT_URL, self.configuration, payment_id)
        logging.info("Returning %s on payment %s", amount, payment_id)
        return self._send(HttpMethod.POST, url, {"amount": amount})

    def void_payment(self, payment_id: str, amount: Decimal | float) -> Transaction:
        url = resolve_url(VOID_PAYMENT_URL, self.configuration, payment_id)
        logging.info("Voiding payment %s", payment_id)
        return self._send(HttpMethod.POST, url, {"amount": amount})
