"""
Delimited-text record format (CSV).

A header row naming the eight columns in canonical order, then one row per
record. Integers are decimal, enums are their literal names and the
description is always double-quoted, with embedded quotes doubled.
"""

import csv
import io
from collections.abc import Iterable
from typing import BinaryIO

from ypbank.core.errors import MalformedLineError, MissingFieldError
from ypbank.core.models import FIELD_NAMES, RecordSet, TransactionRecord
from ypbank.core.rules import build_record

from .base import RecordCodec, read_text

HEADER_ROW = ",".join(FIELD_NAMES)


def quote(value: str) -> str:
    """Wrap a value in double quotes, doubling any embedded quote."""
    return '"' + value.replace('"', '""') + '"'


def format_row(record: TransactionRecord) -> str:
    """Render one record as a CSV row (without line terminator)."""
    return ",".join([
        str(record.tx_id),
        str(record.tx_type),
        str(record.from_user_id),
        str(record.to_user_id),
        str(record.amount),
        str(record.timestamp),
        str(record.status),
        quote(record.description),
    ])


class CsvRecordCodec(RecordCodec):
    """
    Reads and writes the comma-separated table format.
    """

    format_name = "csv"

    def _decode(self, source: BinaryIO) -> RecordSet:
        text = read_text(source)
        if not text:
            return []

        reader = csv.reader(io.StringIO(text, newline=""), strict=True)
        try:
            header = next(reader, None)
            if header is None:
                return []
            if [cell.strip() for cell in header] != list(FIELD_NAMES):
                raise MalformedLineError(",".join(header), "unexpected CSV header")

            records: RecordSet = []
            for row in reader:
                if not row:
                    continue
                records.append(self._parse_row(row))
            return records
        except csv.Error as e:
            raise MalformedLineError(f"line {reader.line_num}", f"invalid CSV: {e}") from e

    def _parse_row(self, row: list[str]) -> TransactionRecord:
        if len(row) < len(FIELD_NAMES):
            raise MissingFieldError(FIELD_NAMES[len(row)])
        if len(row) > len(FIELD_NAMES):
            raise MalformedLineError(
                ",".join(row), f"expected {len(FIELD_NAMES)} fields, got {len(row)}"
            )
        return build_record(dict(zip(FIELD_NAMES, row)))

    def _encode(self, records: Iterable[TransactionRecord], sink: BinaryIO) -> int:
        sink.write((HEADER_ROW + "\n").encode("utf-8"))
        count = 0
        for record in records:
            sink.write((format_row(record) + "\n").encode("utf-8"))
            count += 1
        return count
