"""
Core data models for the transaction record codec.

All models use Pydantic for runtime validation and type safety.
"""

from .transaction_record import (
    FIELD_NAMES,
    U64_MAX,
    RecordSet,
    TransactionRecord,
    TxStatus,
    TxType,
)

__all__ = [
    "FIELD_NAMES",
    "U64_MAX",
    "RecordSet",
    "TransactionRecord",
    "TxStatus",
    "TxType",
]
