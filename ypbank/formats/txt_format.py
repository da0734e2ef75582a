"""
Block-text record format (TXT).

Each record is a block of "KEY: value" lines, optionally preceded by a
"#" comment, and terminated by a blank line:

    # Record 1 DEPOSIT
    TX_ID: 1000000000000000
    TX_TYPE: DEPOSIT
    FROM_USER_ID: 0
    TO_USER_ID: 9223372036854775807
    AMOUNT: 100
    TIMESTAMP: 1633036860000
    STATUS: FAILURE
    DESCRIPTION: "Record number 1"

Values have every double quote removed on read, so descriptions containing
double quotes or line feeds do not round-trip through this format.
"""

import re
from collections.abc import Iterable
from typing import BinaryIO

from ypbank.core.errors import MalformedLineError
from ypbank.core.models import FIELD_NAMES, RecordSet, TransactionRecord
from ypbank.core.rules import build_record

from .base import RecordCodec, read_text

KEY_SEPARATOR = ": "
COMMENT_PREFIX = "#"

_RECORD_NUMBER = re.compile(r"[+-]?[0-9]+")
RECORD_NUMBER_MIN = -(2**31)
RECORD_NUMBER_MAX = 2**31 - 1


def record_number(description: str) -> int:
    """Trailing 32-bit integer token of a description, or 0 when there is none."""
    token = description.split(" ")[-1]
    if not _RECORD_NUMBER.fullmatch(token):
        return 0
    number = int(token)
    if not RECORD_NUMBER_MIN <= number <= RECORD_NUMBER_MAX:
        return 0
    return number


def format_block(record: TransactionRecord) -> str:
    """Render one record as a comment-tagged block, blank line included."""
    lines = [f"{COMMENT_PREFIX} Record {record_number(record.description)} {record.tx_type}"]
    for key, value in record.field_items():
        if key == "DESCRIPTION":
            value = f'"{value}"'
        lines.append(f"{key}{KEY_SEPARATOR}{value}")
    lines.append("")
    return "\n".join(lines) + "\n"


class TxtRecordCodec(RecordCodec):
    """
    Reads and writes the blank-line separated key/value block format.
    """

    format_name = "txt"

    def _decode(self, source: BinaryIO) -> RecordSet:
        records: RecordSet = []
        block: dict[str, str] = {}

        for raw_line in read_text(source).split("\n"):
            line = raw_line.strip()
            if line.startswith(COMMENT_PREFIX):
                continue
            if not line:
                if block:
                    records.append(build_record(block))
                    block = {}
                continue
            self._add_line(line, block)

        if block:
            records.append(build_record(block))
        return records

    def _add_line(self, line: str, block: dict[str, str]) -> None:
        key, separator, value = line.partition(KEY_SEPARATOR)
        if not separator:
            raise MalformedLineError(line, f"expected 'KEY{KEY_SEPARATOR}value'")
        if key not in FIELD_NAMES:
            raise MalformedLineError(line, f"unknown key {key!r}")
        if key in block:
            raise MalformedLineError(line, f"duplicate key {key!r}")
        block[key] = value.replace('"', "")

    def _encode(self, records: Iterable[TransactionRecord], sink: BinaryIO) -> int:
        count = 0
        for record in records:
            sink.write(format_block(record).encode("utf-8"))
            count += 1
        return count
