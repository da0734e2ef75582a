"""
Record set comparer.

Indexes both sets by tx_id and reports keys whose records differ and keys
present on one side only. Order within a set is not significant.
"""

from collections.abc import Iterable

from ypbank.core.models import TransactionRecord

from .report import ComparisonReport, FieldDifference, RecordDifference

IDENTICAL_MESSAGE = "The transaction records are identical."


def index_by_tx_id(records: Iterable[TransactionRecord]) -> dict[int, TransactionRecord]:
    """Build a tx_id -> record index; a later duplicate replaces an earlier one."""
    return {record.tx_id: record for record in records}


def diff_fields(left: TransactionRecord, right: TransactionRecord) -> list[FieldDifference]:
    """List the fields whose values differ, in canonical field order."""
    differences = []
    for (key, left_value), (_, right_value) in zip(left.field_items(), right.field_items()):
        if left_value != right_value:
            differences.append(FieldDifference(field_name=key, left=left_value, right=right_value))
    return differences


def compare_record_sets(
    records1: Iterable[TransactionRecord],
    records2: Iterable[TransactionRecord],
    label1: str = "file1",
    label2: str = "file2",
) -> ComparisonReport:
    """
    Compare two record sets keyed by tx_id.

    Args:
        records1: First record set
        records2: Second record set
        label1: Name used for the first set in the report
        label2: Name used for the second set in the report

    Returns:
        ComparisonReport with differences sorted by tx_id
    """
    index1 = index_by_tx_id(records1)
    index2 = index_by_tx_id(records2)

    differences = []
    for tx_id in sorted(index1.keys() & index2.keys()):
        left, right = index1[tx_id], index2[tx_id]
        if left != right:
            differences.append(
                RecordDifference(tx_id=tx_id, left=left, right=right, fields=diff_fields(left, right))
            )

    return ComparisonReport(
        label1=label1,
        label2=label2,
        differences=differences,
        only_in_first=sorted(index1.keys() - index2.keys()),
        only_in_second=sorted(index2.keys() - index1.keys()),
    )


def format_report(report: ComparisonReport) -> list[str]:
    """Render a report as console lines."""
    if report.identical:
        return [IDENTICAL_MESSAGE]

    lines = []
    for difference in report.differences:
        lines.append(f"Transaction {difference.tx_id} differs:")
        for field in difference.fields:
            lines.append(
                f"  {field.field_name}: {field.left} ({report.label1}) vs {field.right} ({report.label2})"
            )
    for tx_id in report.only_in_first:
        lines.append(f"Transaction {tx_id} present in {report.label1} but missing in {report.label2}")
    for tx_id in report.only_in_second:
        lines.append(f"Transaction {tx_id} present in {report.label2} but missing in {report.label1}")
    return lines
