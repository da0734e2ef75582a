"""
Conversion between record formats.

Every codec decodes into the same in-memory RecordSet, so converting is
decoding with one codec and encoding the unchanged records with another.
"""

from typing import BinaryIO

from ypbank.core.models import RecordSet

from .registry import FileFormat, get_codec


def convert(
    source: BinaryIO,
    sink: BinaryIO,
    input_format: str | FileFormat,
    output_format: str | FileFormat,
) -> RecordSet:
    """
    Decode records from source and re-encode them into sink.

    Nothing is written to sink unless the whole input decodes.

    Args:
        source: Byte source in input_format
        sink: Byte sink for output_format
        input_format: Format of the source
        output_format: Format to write

    Returns:
        The converted records

    Raises:
        CodecError: If the input is malformed
        OSError: If reading or writing fails
    """
    records = get_codec(input_format).decode(source)
    get_codec(output_format).encode(records, sink)
    return records


def convert_bytes(
    data: bytes,
    input_format: str | FileFormat,
    output_format: str | FileFormat,
) -> bytes:
    """In-memory variant of convert()."""
    records = get_codec(input_format).decode_bytes(data)
    return get_codec(output_format).encode_bytes(records)
