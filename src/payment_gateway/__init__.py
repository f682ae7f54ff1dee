"""
Public facade for the payment gateway client package.

The most useful pieces are re-exported so integrators can
``from payment_gateway import ...`` without navigating the package.
"""

from .api import create_gateway, get_transaction, query_transactions
from .core import (
    ConfigError,
    Configuration,
    Criteria,
    DecodeError,
    Gateway,
    GatewayError,
    HttpMethod,
    InvalidArgument,
    MissingCredential,
    PaymentsAPI,
    ProfilesAPI,
    ReportingAPI,
    RequestsTransport,
    Transaction,
    TransactionRecord,
    Transport,
    TransportError,
    load_gateway_config,
)

__all__ = (
    "ConfigError",
    "Configuration",
    "Criteria",
    "DecodeError",
    "Gateway",
    "GatewayError",
    "HttpMethod",
    "InvalidArgument",
    "MissingCredential",
    "PaymentsAPI",
    "ProfilesAPI",
    "ReportingAPI",
    "RequestsTransport",
    "Transaction",
    "TransactionRecord",
    "Transport",
    "TransportError",
    "create_gateway",
    "get_transaction",
    "load_gateway_config",
    "query_transactions",
)
