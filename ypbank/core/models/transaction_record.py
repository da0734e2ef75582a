"""
TransactionRecord model representing one bank transaction, the unit of data
shared by every codec.
"""

from enum import Enum

from pydantic import BaseModel, Field

U64_MAX = 2**64 - 1

# Column/key order used by both text formats. The model attribute for each
# key is its lower-cased name.
FIELD_NAMES = (
    "TX_ID",
    "TX_TYPE",
    "FROM_USER_ID",
    "TO_USER_ID",
    "AMOUNT",
    "TIMESTAMP",
    "STATUS",
    "DESCRIPTION",
)


class TxType(str, Enum):
    """Kind of transaction. The value is the canonical text literal."""

    DEPOSIT = "DEPOSIT"
    TRANSFER = "TRANSFER"
    WITHDRAWAL = "WITHDRAWAL"

    def __str__(self) -> str:
        return self.value


class TxStatus(str, Enum):
    """Outcome of a transaction. The value is the canonical text literal."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PENDING = "PENDING"

    def __str__(self) -> str:
        return self.value


class TransactionRecord(BaseModel):
    """
    A single bank transaction.

    Records are immutable values; two records are equal when all eight
    fields are equal.

    Attributes:
        tx_id: Transaction identifier, the key of a record set
        tx_type: DEPOSIT, TRANSFER or WITHDRAWAL
        from_user_id: Sending account (0 for deposits)
        to_user_id: Receiving account (0 for withdrawals)
        amount: Amount in the smallest currency unit
        timestamp: Epoch milliseconds
        status: SUCCESS, FAILURE or PENDING
        description: Free UTF-8 text
    """

    tx_id: int = Field(..., ge=0, le=U64_MAX)
    tx_type: TxType
    from_user_id: int = Field(..., ge=0, le=U64_MAX)
    to_user_id: int = Field(..., ge=0, le=U64_MAX)
    amount: int = Field(..., ge=0, le=U64_MAX)
    timestamp: int = Field(..., ge=0, le=U64_MAX)
    status: TxStatus
    description: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "tx_id": 1000000000000000,
                "tx_type": "DEPOSIT",
                "from_user_id": 0,
                "to_user_id": 9223372036854775807,
                "amount": 100,
                "timestamp": 1633036860000,
                "status": "FAILURE",
                "description": "Record number 1",
            }
        }

    def field_items(self) -> list[tuple[str, object]]:
        """Return (KEY, value) pairs in canonical field order."""
        return [(key, getattr(self, key.lower())) for key in FIELD_NAMES]


# Ordered sequence of records; order is kept by every codec but carries no
# meaning for comparison.
RecordSet = list[TransactionRecord]
