"""Tests for the reporting API: query validation, search and transaction lookup."""

import json
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from payment_gateway import (
    Criteria,
    DecodeError,
    InvalidArgument,
    MissingCredential,
    Transaction,
)
from payment_gateway.core.reporting import validate_query
from payment_gateway.core.transport import HttpMethod


class TestValidateQuery:
    @pytest.mark.parametrize(
        "start_date, end_date",
        [(None, date(2024, 1, 1)), (date(2024, 1, 1), None), (None, None)],
    )
    def test_missing_date(self, start_date, end_date):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(start_date, end_date, 0, 10)
        assert exc_info.value.check == "missing-date"

    def test_end_date_before_start_date(self):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(date(2024, 2, 1), date(2024, 1, 1), 0, 10)
        assert exc_info.value.check == "date-range"

    def test_equal_dates_are_allowed(self):
        validate_query(date(2024, 1, 1), date(2024, 1, 1), 0, 10)

    def test_end_row_before_start_row(self):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(date(2024, 1, 1), date(2024, 1, 2), 50, 10)
        assert exc_info.value.check == "row-range"

    def test_span_over_limit(self):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(date(2024, 1, 1), date(2024, 1, 2), 0, 1001)
        assert exc_info.value.check == "page-too-large"

    def test_span_of_exactly_limit_passes(self):
        validate_query(date(2024, 1, 1), date(2024, 1, 2), 0, 1000)

    def test_first_failing_check_wins(self):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(date(2024, 2, 1), date(2024, 1, 1), 50, 10)
        assert exc_info.value.check == "date-range"

    def test_date_and_datetime_can_be_mixed(self):
        validate_query(date(2024, 1, 1), datetime(2024, 1, 31, 12), 0, 10)

        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(datetime(2024, 1, 31, 12), date(2024, 1, 31), 0, 10)
        assert exc_info.value.check == "date-range"

    def test_aware_and_naive_datetimes_are_rejected(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)

        with pytest.raises(InvalidArgument) as exc_info:
            validate_query(start, datetime(2024, 1, 31), 0, 10)
        assert exc_info.value.check == "date-range"

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_query(None, None, 0, 0)


class TestQuery:
    def test_returns_records_in_order(self, gateway, stub_transport):
        stub_transport.response = '{"records":[{"id":"t1"},{"id":"t2"}]}'

        records = gateway.reporting.query(date(2024, 1, 1), date(2024, 1, 31), 1, 1001)

        assert [record.id for record in records] == ["t1", "t2"]

    def test_posts_search_payload_with_reporting_passcode(self, gateway, stub_transport):
        stub_transport.response = '{"records":[]}'
        criteria = (Criteria(field=1, operator="%3D", value="10000001"), Criteria("2", "<", "5"))

        gateway.reporting.query(
            datetime(2024, 1, 1), datetime(2024, 1, 31, 23, 59), 1, 100, *criteria
        )

        call = stub_transport.last
        assert call.method == HttpMethod.POST
        assert call.url == "https://www.api.na.bambora.com/v1/reports"
        assert call.credentials.passcode == "report-key"
        assert call.credentials.merchant_id == 300200578
        assert json.loads(call.body) == {
            "name": "Search",
            "start_date": "2024-01-01T00:00:00",
            "end_date": "2024-01-31T23:59:00",
            "start_row": 1,
            "end_row": 100,
            "criteria": [
                {"field": 1, "operator": "%3D", "value": "10000001"},
                {"field": "2", "operator": "<", "value": "5"},
            ],
        }

    def test_mixed_date_types_reach_the_transport(self, gateway, stub_transport):
        stub_transport.response = '{"records":[]}'

        gateway.reporting.query(date(2024, 1, 1), datetime(2024, 1, 31, 12), 0, 10)

        body = json.loads(stub_transport.last.body)
        assert body["start_date"] == "2024-01-01T00:00:00"
        assert body["end_date"] == "2024-01-31T12:00:00"

    def test_validation_happens_before_dispatch(self, gateway, stub_transport):
        with pytest.raises(InvalidArgument):
            gateway.reporting.query(date(2024, 1, 1), date(2024, 1, 2), 0, 1001)

        assert stub_transport.calls == []

    def test_missing_reporting_passcode(self, gateway, stub_transport):
        gateway.configuration.reporting_api_passcode = ""

        with pytest.raises(MissingCredential) as exc_info:
            gateway.reporting.query(date(2024, 1, 1), date(2024, 1, 2), 0, 10)

        assert exc_info.value.capability == "reporting"
        assert stub_transport.calls == []

    @pytest.mark.parametrize("body", ["not json", '{"other": []}', '{"records": {}}', "[]"])
    def test_malformed_response(self, gateway, stub_transport, body):
        stub_transport.response = body

        with pytest.raises(DecodeError):
            gateway.reporting.query(date(2024, 1, 1), date(2024, 1, 2), 0, 10)


class TestGetTransaction:
    def test_decodes_transaction(self, gateway, stub_transport):
        stub_transport.response = '{"id":"abc123","amount":10.00}'

        transaction = gateway.reporting.get_transaction("abc123")

        assert isinstance(transaction, Transaction)
        assert transaction.id == "abc123"
        assert transaction.amount == Decimal("10.00")
        assert "abc123" in stub_transport.last.url

    def test_uses_payments_passcode_and_get(self, gateway, stub_transport):
        stub_transport.response = '{"id":"abc123"}'

        gateway.reporting.get_transaction("abc123")

        call = stub_transport.last
        assert call.method == HttpMethod.GET
        assert call.body is None
        assert call.credentials.passcode == "pay-key"

    def test_missing_payments_passcode(self, gateway):
        gateway.payments_api_key = ""

        with pytest.raises(MissingCredential) as exc_info:
            gateway.reporting.get_transaction("abc123")

        assert exc_info.value.capability == "payments"

    def test_empty_id_is_forwarded(self, gateway, stub_transport):
        stub_transport.response = "{}"

        gateway.reporting.get_transaction("")

        assert stub_transport.last.url.endswith("/payments/")

    def test_respects_configured_version_and_platform(self, gateway, stub_transport):
        gateway.configuration.version = "2"
        gateway.configuration.platform = "sandbox"
        stub_transport.response = "{}"

        gateway.reporting.get_transaction("42")

        assert stub_transport.last.url == "https://sandbox.api.na.bambora.com/v2/payments/42"
