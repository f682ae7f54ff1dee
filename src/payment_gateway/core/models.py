"""
Payload shapes exchanged with the gateway.

The client does not interpret these beyond lifting the common fields into
attributes; the complete decoded object is always available as ``raw``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional

from .errors import DecodeError

__all__ = ["Criteria", "Transaction", "TransactionRecord"]


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise DecodeError(f"Amount '{value}' is not a number") from exc


def _to_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class Transaction:
    id: Optional[str]
    amount: Optional[Decimal] = None
    approved: Optional[bool] = None
    message: Optional[str] = None
    auth_code: Optional[str] = None
    created: Optional[str] = None
    order_number: Optional[str] = None
    type: Optional[str] = None
    payment_method: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Transaction":
        approved = payload.get("approved")
        return cls(
            id=_to_str(payload.get("id")),
            amount=_to_decimal(payload.get("amount")),
            approved=None if approved is None else str(approved) in ("1", "true", "True"),
            message=payload.get("message"),
            auth_code=payload.get("auth_code"),
            created=payload.get("created"),
            order_number=_to_str(payload.get("order_number")),
            type=payload.get("type"),
            payment_method=payload.get("payment_method"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class TransactionRecord:
    """One row of a reporting search result."""

    id: Optional[str]
    amount: Optional[Decimal] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TransactionRecord":
        record_id = payload.get("id", payload.get("trn_id"))
        return cls(
            id=_to_str(record_id),
            amount=_to_decimal(payload.get("amount", payload.get("trn_amount"))),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class Criteria:
    """
    A single search predicate for a reporting query.

    The values are sent exactly as given; see the gateway's reporting
    documentation for the field ids and operators it accepts.
    """

    field: Any
    operator: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "operator": self.operator, "value": self.value}
