"""
Keyed comparison of two record sets.
"""

from .comparer import compare_record_sets, format_report
from .report import ComparisonReport, FieldDifference, RecordDifference

__all__ = [
    "ComparisonReport",
    "FieldDifference",
    "RecordDifference",
    "compare_record_sets",
    "format_report",
]
