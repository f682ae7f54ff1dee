"""
JSON encoding of request payloads and decoding of response bodies.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List

from .errors import DecodeError, InvalidArgument

__all__ = ["decode_json", "decode_object", "decode_records", "encode_json"]


def _default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).isoformat()
    if isinstance(value, Decimal):
        number = float(value)
        if Decimal(repr(number)) != value:
            raise InvalidArgument(
                "amount-precision",
                f"Amount {value} cannot be sent as a JSON number without losing precision",
            )
        return number
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(payload: Any) -> str:
    """Serialize ``payload`` to the wire format."""
    return json.dumps(payload, default=_default)


def decode_json(body: str) -> Any:
    try:
        return json.loads(body, parse_float=Decimal)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Response is not valid JSON: {body!r}", body=body) from exc


def decode_object(body: str) -> Dict[str, Any]:
    """Decode ``body`` and require a JSON object at the top level."""
    payload = decode_json(body)
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(payload).__name__}", body=body
        )
    return payload


def decode_records(body: str, field: str = "records") -> List[Dict[str, Any]]:
    """Decode an object wrapping a single array and return that array."""
    payload = decode_object(body)
    records = payload.get(field)
    if not isinstance(records, list):
        raise DecodeError(f"Expected '{field}' to be a JSON array", body=body)
    for record in records:
        if not isinstance(record, dict):
            raise DecodeError(f"Expected every entry of '{field}' to be an object", body=body)
    return records
