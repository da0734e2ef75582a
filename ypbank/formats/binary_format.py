"""
Binary record format (YPBN frames).

Each record is one self-contained frame, all integers big-endian:

    header  magic u32 (0x5950424E, "YPBN") | record_size u32
    body    tx_id u64 | tx_type u8 | from_user_id u64 | to_user_id u64 |
            amount u64 | timestamp u64 | status u8 | desc_len u32 |
            description (desc_len UTF-8 bytes)

record_size counts the body: 46 fixed bytes plus desc_len. The description
bytes are carried as-is; no quotes are added on write or removed on read.
"""

import struct
from collections.abc import Iterable
from typing import BinaryIO

from ypbank.core.errors import (
    FieldConversionError,
    InvalidEnumValueError,
    InvalidMagicError,
    LengthMismatchError,
    TextDecodingError,
    TruncatedDescriptionError,
    TruncatedStreamError,
)
from ypbank.core.models import RecordSet, TransactionRecord, TxStatus, TxType

from .base import RecordCodec

MAGIC = 0x5950424E

HEADER = struct.Struct(">II")
BODY_FIXED = struct.Struct(">QBQQQQBI")

HEADER_SIZE = HEADER.size  # 8
BODY_FIXED_SIZE = BODY_FIXED.size  # 46
MAX_DESCRIPTION_SIZE = 0xFFFFFFFF - BODY_FIXED_SIZE

TX_TYPE_BY_CODE = {
    0: TxType.DEPOSIT,
    1: TxType.TRANSFER,
    2: TxType.WITHDRAWAL,
}
TX_TYPE_CODES = {tx_type: code for code, tx_type in TX_TYPE_BY_CODE.items()}

STATUS_BY_CODE = {
    0: TxStatus.SUCCESS,
    1: TxStatus.FAILURE,
    2: TxStatus.PENDING,
}
STATUS_CODES = {status: code for code, status in STATUS_BY_CODE.items()}


def read_exact(source: BinaryIO, size: int) -> bytes:
    """
    Read up to size bytes, retrying short reads until the source is exhausted.

    Returns fewer than size bytes only at end of stream.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def parse_body(body: bytes) -> TransactionRecord:
    """
    Parse one frame body into a record.

    Args:
        body: Exactly record_size bytes

    Raises:
        FrameError: If the body is shorter than its fixed part or description
        LengthMismatchError: If bytes remain after the description
        InvalidEnumValueError: If a type/status code is unknown
        TextDecodingError: If the description is not UTF-8
    """
    if len(body) < BODY_FIXED_SIZE:
        raise TruncatedStreamError("record body", BODY_FIXED_SIZE, len(body))

    (
        tx_id,
        tx_type_code,
        from_user_id,
        to_user_id,
        amount,
        timestamp,
        status_code,
        desc_len,
    ) = BODY_FIXED.unpack_from(body)

    tx_type = TX_TYPE_BY_CODE.get(tx_type_code)
    if tx_type is None:
        raise InvalidEnumValueError("TX_TYPE", tx_type_code)
    status = STATUS_BY_CODE.get(status_code)
    if status is None:
        raise InvalidEnumValueError("STATUS", status_code)

    available = len(body) - BODY_FIXED_SIZE
    if desc_len > available:
        raise TruncatedDescriptionError(desc_len, available)
    if desc_len < available:
        raise LengthMismatchError(BODY_FIXED_SIZE + desc_len, len(body), what="record body")

    try:
        description = body[BODY_FIXED_SIZE:].decode("utf-8")
    except UnicodeDecodeError as e:
        raise TextDecodingError(str(e)) from e

    return TransactionRecord(
        tx_id=tx_id,
        tx_type=tx_type,
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        amount=amount,
        timestamp=timestamp,
        status=status,
        description=description,
    )


def pack_record(record: TransactionRecord) -> bytes:
    """
    Pack one record into a complete frame (header + body).

    Raises:
        FieldConversionError: If the description is too long for a frame
    """
    description = record.description.encode("utf-8")
    desc_len = len(description)
    if desc_len > MAX_DESCRIPTION_SIZE:
        raise FieldConversionError(
            "DESCRIPTION", f"<{desc_len} bytes>", "too long for a binary frame"
        )

    header = HEADER.pack(MAGIC, BODY_FIXED_SIZE + desc_len)
    body = BODY_FIXED.pack(
        record.tx_id,
        TX_TYPE_CODES[record.tx_type],
        record.from_user_id,
        record.to_user_id,
        record.amount,
        record.timestamp,
        STATUS_CODES[record.status],
        desc_len,
    )
    return header + body + description


class BinaryRecordCodec(RecordCodec):
    """
    Reads and writes back-to-back YPBN frames.
    """

    format_name = "bin"

    def _decode(self, source: BinaryIO) -> RecordSet:
        records: RecordSet = []
        while True:
            header = read_exact(source, HEADER_SIZE)
            if not header:
                break
            if len(header) < HEADER_SIZE:
                raise TruncatedStreamError("frame header", HEADER_SIZE, len(header))

            magic, record_size = HEADER.unpack(header)
            if magic != MAGIC:
                raise InvalidMagicError(MAGIC, magic)

            body = read_exact(source, record_size)
            if len(body) < record_size:
                raise TruncatedStreamError("frame body", record_size, len(body))

            records.append(parse_body(body))
        return records

    def _encode(self, records: Iterable[TransactionRecord], sink: BinaryIO) -> int:
        count = 0
        for record in records:
            sink.write(pack_record(record))
            count += 1
        return count
