"""
Core primitives: configuration, URL templates, transport and the capability APIs.
"""

from .codec import decode_json, decode_object, decode_records, encode_json
from .config import ConfigError, Configuration, load_gateway_config
from .errors import (
    DecodeError,
    GatewayError,
    InvalidArgument,
    MissingCredential,
    TransportError,
)
from .gateway import Gateway
from .models import Criteria, Transaction, TransactionRecord
from .payments import PaymentsAPI
from .profiles import ProfilesAPI
from .reporting import MAX_QUERY_ROWS, ReportingAPI, validate_query
from .request import CapabilityAPI, GatewayRequest
from .transport import Credentials, HttpMethod, RequestsTransport, Transport
from .urls import resolve_url

__all__ = [
    "CapabilityAPI",
    "ConfigError",
    "Configuration",
    "Credentials",
    "Criteria",
    "DecodeError",
    "Gateway",
    "GatewayError",
    "GatewayRequest",
    "HttpMethod",
    "InvalidArgument",
    "MAX_QUERY_ROWS",
    "MissingCredential",
    "PaymentsAPI",
    "ProfilesAPI",
    "ReportingAPI",
    "RequestsTransport",
    "Transaction",
    "TransactionRecord",
    "Transport",
    "TransportError",
    "decode_json",
    "decode_object",
    "decode_records",
    "encode_json",
    "load_gateway_config",
    "resolve_url",
    "validate_query",
]
