"""
Reporting capability: transaction lookup and paged transaction search.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional

from .codec import decode_object, decode_records
from .errors import InvalidArgument
from .models import Criteria, Transaction, TransactionRecord
from .request import CapabilityAPI, GatewayRequest
from .transport import HttpMethod
from .urls import PAYMENT_URL, REPORTS_URL, resolve_url

__all__ = ["MAX_QUERY_ROWS", "ReportingAPI", "validate_query"]

MAX_QUERY_ROWS = 1000


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def validate_query(
    start_date: Optional[date],
    end_date: Optional[date],
    start_row: int,
    end_row: int,
) -> None:
    """
    Reject a search window before it is sent.

    Checks run in a fixed order and the first failure is raised. The row
    limit applies to ``end_row - start_row``, so a difference of exactly
    :data:`MAX_QUERY_ROWS` is accepted. A plain ``date`` counts as midnight.
    """
    if start_date is None or end_date is None:
        raise InvalidArgument("missing-date", "Start date and end date are required")
    try:
        reversed_range = _as_datetime(end_date) < _as_datetime(start_date)
    except TypeError as exc:
        raise InvalidArgument(
            "date-range",
            "Start date and end date must both be timezone-aware or both naive",
        ) from exc
    if reversed_range:
        raise InvalidArgument("date-range", "End date cannot be before start date")
    if end_row < start_row:
        raise InvalidArgument("row-range", "End row cannot be less than start row")
    if end_row - start_row > MAX_QUERY_ROWS:
        raise InvalidArgument(
            "page-too-large",
            f"Cannot query more than {MAX_QUERY_ROWS} rows at a time",
        )


class ReportingAPI(CapabilityAPI):
    capability = "reporting"
    passcode_field = "reporting_api_passcode"

    def get_transaction(self, payment_id: str) -> Transaction:
        """
        Fetch a single transaction by id.

        The lookup goes through the payments resource and is authorized with
        the payments passcode.
        """
        url = resolve_url(PAYMENT_URL, self.configuration, payment_id)
        request = GatewayRequest(
            capability="payments",
            merchant_id=self.configuration.merchant_id,
            passcode=self.configuration.payments_api_passcode,
            transport=self.transport,
        )
        response = request.process(HttpMethod.GET, url)
        return Transaction.from_dict(decode_object(response))

    def query(
        self,
        start_date: date,
        end_date: date,
        start_row: int,
        end_row: int,
        *criteria: Criteria,
    ) -> List[TransactionRecord]:
        """
        Search transactions between two dates (inclusive).

        The gateway returns at most :data:`MAX_QUERY_ROWS` rows per call;
        fetch further pages by calling again with the next row window.
        """
        validate_query(start_date, end_date, start_row, end_row)

        url = resolve_url(REPORTS_URL, self.configuration)
        query = {
            "name": "Search",
            "start_date": start_date,
            "end_date": end_date,
            "start_row": start_row,
            "end_row": end_row,
            "criteria": list(criteria),
        }
        response = self._request().process(HttpMethod.POST, url, query)
        records = [TransactionRecord.from_dict(item) for item in decode_records(response)]
        logging.info("Report search returned %d records", len(records))
        return records
