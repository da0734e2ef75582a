"""
UnsignedIntValidator - converts decimal text to a bounded unsigned integer.
"""

import re
from collections.abc import Mapping
from typing import Any

from ypbank.core.errors import FieldConversionError

from .base_validator import BaseValidator

_DIGITS = re.compile(r"[0-9]+")


class UnsignedIntValidator(BaseValidator):
    """
    Validates that a field is an unsigned integer of the configured width.

    Only ASCII decimal digits are accepted: no sign, no whitespace, no
    underscores (all of which int() would otherwise allow).

    Parameters:
        bits: Integer width, default 64
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.bits = self.parameters.get("bits", 64)
        if self.bits <= 0:
            raise ValueError(f"UnsignedIntValidator requires a positive bit width, got {self.bits}")
        self.max_value = 2**self.bits - 1

    def validate(self, value: Any, record: Mapping[str, Any]) -> int:
        """
        Convert the value to int.

        Raises:
            FieldConversionError: If the text is not a decimal number in range
        """
        if isinstance(value, bool):
            raise FieldConversionError(self.field_name, value, "expected an unsigned integer")
        if isinstance(value, int):
            number = value
        elif isinstance(value, str) and _DIGITS.fullmatch(value):
            number = int(value)
        else:
            raise FieldConversionError(self.field_name, value, "expected an unsigned integer")

        if not 0 <= number <= self.max_value:
            raise FieldConversionError(
                self.field_name, value, f"out of range for u{self.bits}"
            )
        return number
