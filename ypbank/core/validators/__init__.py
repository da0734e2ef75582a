"""
Field validators for text-encoded records.

Each validator checks one raw text field and returns its typed value.
"""

from .base_validator import BaseValidator
from .enum_validator import EnumValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import UnsignedIntValidator

__all__ = [
    "BaseValidator",
    "EnumValidator",
    "RequiredFieldValidator",
    "UnsignedIntValidator",
]
