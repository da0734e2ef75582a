"""
Comparison report models.
"""

from typing import Any

from pydantic import BaseModel, Field

from ypbank.core.models import TransactionRecord


class FieldDifference(BaseModel):
    """One field whose value differs between two records with the same tx_id."""

    field_name: str
    left: Any
    right: Any


class RecordDifference(BaseModel):
    """
    A tx_id present in both sets with unequal records.

    Attributes:
        tx_id: The shared key
        left: Record from the first set
        right: Record from the second set
        fields: Differing fields, in canonical field order
    """

    tx_id: int
    left: TransactionRecord
    right: TransactionRecord
    fields: list[FieldDifference] = Field(default_factory=list)


class ComparisonReport(BaseModel):
    """
    Outcome of comparing two record sets keyed by tx_id.

    Attributes:
        label1: Name of the first set (usually its file path)
        label2: Name of the second set
        differences: Keys present in both sets with unequal records
        only_in_first: Keys present only in the first set, ascending
        only_in_second: Keys present only in the second set, ascending
    """

    label1: str
    label2: str
    differences: list[RecordDifference] = Field(default_factory=list)
    only_in_first: list[int] = Field(default_factory=list)
    only_in_second: list[int] = Field(default_factory=list)

    @property
    def identical(self) -> bool:
        return not (self.differences or self.only_in_first or self.only_in_second)
