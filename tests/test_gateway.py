"""Tests for the Gateway facade: lazy configuration and accessor wiring."""

from unittest.mock import patch

from payment_gateway import Gateway
from payment_gateway.core.config import Configuration
from payment_gateway.core.payments import PaymentsAPI
from payment_gateway.core.transport import RequestsTransport

from tests.conftest import StubTransport


class TestConfiguration:
    def test_configuration_is_created_once(self):
        gateway = Gateway()

        assert gateway.configuration is gateway.configuration

    def test_passcodes_default_to_empty(self):
        gateway = Gateway()

        assert gateway.payments_api_key == ""
        assert gateway.profiles_api_key == ""
        assert gateway.reporting_api_key == ""

    def test_fields_set_before_first_access_seed_configuration(self):
        gateway = Gateway()
        gateway.merchant_id = 117
        gateway.api_version = "2"
        gateway.payments_api_key = "pay-key"

        config = gateway.configuration

        assert config.merchant_id == 117
        assert config.version == "2"
        assert config.payments_api_passcode == "pay-key"

    def test_fields_set_after_first_access_are_ignored(self):
        """The first read of the configuration freezes merchant id and version."""
        gateway = Gateway(merchant_id=117, api_version="2")
        config = gateway.configuration

        gateway.merchant_id = 999
        gateway.api_version = "3"

        assert gateway.configuration.merchant_id == 117
        assert gateway.configuration.version == "2"

        config.merchant_id = 999
        assert gateway.configuration.merchant_id == 999

    def test_passcode_properties_pass_through(self):
        gateway = Gateway()
        gateway.reporting_api_key = "first"
        gateway.configuration.reporting_api_passcode = "second"

        assert gateway.reporting_api_key == "second"

    def test_from_config_adopts_configuration(self):
        config = Configuration(merchant_id=5, payments_api_passcode="k")

        gateway = Gateway.from_config(config)

        assert gateway.configuration is config


class TestAccessors:
    def test_payments_is_memoized(self):
        gateway = Gateway()

        first = gateway.payments
        second = gateway.payments

        assert first is second
        assert isinstance(first, PaymentsAPI)

    def test_accessors_share_configuration(self):
        gateway = Gateway()

        assert gateway.payments.configuration is gateway.configuration
        assert gateway.profiles.configuration is gateway.configuration
        assert gateway.reporting.configuration is gateway.configuration

    def test_accessor_configuration_tracks_the_gateway(self):
        gateway = Gateway()
        payments = gateway.payments
        replacement = Configuration(merchant_id=42)
        gateway._configuration = replacement

        assert gateway.payments is payments
        assert payments.configuration is replacement

    def test_default_transport_without_override(self):
        gateway = Gateway()

        assert isinstance(gateway.reporting.transport, RequestsTransport)

    def test_transport_override_reaches_existing_accessor(self):
        gateway = Gateway()
        reporting = gateway.reporting
        stub = StubTransport()

        gateway.transport = stub

        assert gateway.reporting is reporting
        assert reporting.transport is stub

    def test_clearing_override_keeps_previous_transport(self):
        stub = StubTransport()
        gateway = Gateway(transport=stub)
        profiles = gateway.profiles

        gateway.transport = None

        assert gateway.profiles is profiles
        assert profiles.transport is stub

    def test_separate_gateways_do_not_share_state(self):
        first = Gateway(merchant_id=1)
        second = Gateway(merchant_id=2)

        assert first.configuration is not second.configuration
        assert first.payments is not second.payments

    def test_override_skips_default_transport(self):
        """Accessors built under an override never open their own session."""
        stub = StubTransport()

        with patch("payment_gateway.core.request.RequestsTransport") as default_transport:
            gateway = Gateway(transport=stub)
            apis = [gateway.payments, gateway.profiles, gateway.reporting]

        default_transport.assert_not_called()
        assert all(api.transport is stub for api in apis)

    def test_each_accessor_reads_its_own_passcode(self, stub_transport):
        gateway = Gateway(merchant_id=1, transport=stub_transport)
        gateway.payments_api_key = "pay"
        gateway.profiles_api_key = "profile"
        gateway.reporting_api_key = "report"

        passcodes = [
            api._request().passcode
            for api in (gateway.payments, gateway.profiles, gateway.reporting)
        ]

        assert passcodes == ["pay", "profile", "report"]
