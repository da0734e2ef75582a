"""
Format names and codec lookup.
"""

from enum import Enum

from .base import RecordCodec
from .binary_format import BinaryRecordCodec
from .csv_format import CsvRecordCodec
from .txt_format import TxtRecordCodec


class FileFormat(str, Enum):
    """Physical record encodings."""

    CSV = "csv"
    TXT = "txt"
    BIN = "bin"

    def __str__(self) -> str:
        return self.value


# Alternate spellings accepted wherever a format name is parsed
FORMAT_ALIASES = {
    "binary": FileFormat.BIN,
}

FORMAT_NAMES = [f.value for f in FileFormat] + list(FORMAT_ALIASES)

CODEC_REGISTRY: dict[FileFormat, RecordCodec] = {
    FileFormat.CSV: CsvRecordCodec(),
    FileFormat.TXT: TxtRecordCodec(),
    FileFormat.BIN: BinaryRecordCodec(),
}


def parse_format(name: str | FileFormat) -> FileFormat:
    """
    Resolve a format name ("csv", "txt", "bin" or "binary"; case-insensitive).

    Raises:
        ValueError: If the name is not a known format
    """
    if isinstance(name, FileFormat):
        return name
    key = name.lower()
    if key in FORMAT_ALIASES:
        return FORMAT_ALIASES[key]
    try:
        return FileFormat(key)
    except ValueError:
        choices = ", ".join(FORMAT_NAMES)
        raise ValueError(f"Unsupported file format: {name} (expected one of {choices})") from None


def get_codec(file_format: str | FileFormat) -> RecordCodec:
    """Return the codec for a format."""
    return CODEC_REGISTRY[parse_format(file_format)]
