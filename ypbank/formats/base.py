"""
Codec interface shared by every record format.

A codec exposes exactly two operations, decode(source) and encode(records,
sink), over byte streams. The base class wraps the format-specific work with
logging and metrics; failures propagate unchanged.
"""

import io
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import BinaryIO

from ypbank.core.errors import CodecError, TextDecodingError
from ypbank.core.models import RecordSet, TransactionRecord
from ypbank.observability.logger import get_logger
from ypbank.observability.metrics import (
    codec_operation_duration_seconds,
    record_codec_failure,
    record_codec_success,
    track_duration,
)

logger = get_logger(__name__)

READ_CHUNK_SIZE = 64 * 1024
UTF8_BOM = "\ufeff"


class RecordCodec(ABC):
    """
    Abstract base class for record codecs.

    Subclasses implement _decode() and _encode(). Codec instances hold no
    per-call state and may be shared.
    """

    format_name: str = ""

    def decode(self, source: BinaryIO) -> RecordSet:
        """
        Decode every record from a byte source.

        Args:
            source: Object offering read(n) -> bytes; not closed by the codec

        Returns:
            The decoded records, in stream order

        Raises:
            CodecError: If the input is malformed (no partial result)
            OSError: If reading fails
        """
        with track_duration(codec_operation_duration_seconds, format=self.format_name, operation="decode"):
            try:
                records = self._decode(source)
            except (CodecError, OSError) as e:
                self._log_failure("decode", e)
                raise
        record_codec_success(self.format_name, "decode", len(records))
        logger.debug(
            "Decoded records",
            extra={"format": self.format_name, "record_count": len(records)},
        )
        return records

    def encode(self, records: Iterable[TransactionRecord], sink: BinaryIO) -> None:
        """
        Encode records into a byte sink.

        Args:
            records: Records to write, in order
            sink: Object offering write(bytes); not closed by the codec

        Raises:
            CodecError: If a record cannot be represented in this format
            OSError: If writing fails
        """
        with track_duration(codec_operation_duration_seconds, format=self.format_name, operation="encode"):
            try:
                count = self._encode(records, sink)
            except (CodecError, OSError) as e:
                self._log_failure("encode", e)
                raise
        record_codec_success(self.format_name, "encode", count)
        logger.debug(
            "Encoded records",
            extra={"format": self.format_name, "record_count": count},
        )

    def decode_bytes(self, data: bytes) -> RecordSet:
        """Decode records from an in-memory byte string."""
        return self.decode(io.BytesIO(data))

    def encode_bytes(self, records: Iterable[TransactionRecord]) -> bytes:
        """Encode records into an in-memory byte string."""
        sink = io.BytesIO()
        self.encode(records, sink)
        return sink.getvalue()

    @abstractmethod
    def _decode(self, source: BinaryIO) -> RecordSet:
        """Format-specific decoding."""
        pass

    @abstractmethod
    def _encode(self, records: Iterable[TransactionRecord], sink: BinaryIO) -> int:
        """Format-specific encoding; returns the number of records written."""
        pass

    def _log_failure(self, operation: str, error: BaseException) -> None:
        record_codec_failure(self.format_name, operation, error)
        logger.warning(
            f"Failed to {operation} {self.format_name} records: {error}",
            extra={
                "format": self.format_name,
                "operation": operation,
                "error_type": type(error).__name__,
            },
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"


def read_text(source: BinaryIO) -> str:
    """
    Read a byte source to the end and decode it as UTF-8.

    A leading byte order mark is dropped.

    Raises:
        TextDecodingError: If the bytes are not valid UTF-8
    """
    chunks = []
    while True:
        chunk = source.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    try:
        text = b"".join(chunks).decode("utf-8")
    except UnicodeDecodeError as e:
        raise TextDecodingError(str(e)) from e
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]
    return text
