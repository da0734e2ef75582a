"""
Field rules that turn raw text mappings into records.
"""

from .record_builder import RecordBuilder, build_record

__all__ = [
    "RecordBuilder",
    "build_record",
]
