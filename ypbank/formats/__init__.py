"""
Record format codecs.
"""

from .base import RecordCodec
from .binary_format import BinaryRecordCodec
from .conversion import convert, convert_bytes
from .csv_format import CsvRecordCodec
from .registry import FORMAT_NAMES, FileFormat, get_codec, parse_format
from .txt_format import TxtRecordCodec

__all__ = [
    "FORMAT_NAMES",
    "BinaryRecordCodec",
    "CsvRecordCodec",
    "FileFormat",
    "RecordCodec",
    "TxtRecordCodec",
    "convert",
    "convert_bytes",
    "get_codec",
    "parse_format",
]
