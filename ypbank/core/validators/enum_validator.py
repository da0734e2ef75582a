"""
EnumValidator - maps a text literal onto a closed enumeration.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from ypbank.core.errors import InvalidEnumValueError

from .base_validator import BaseValidator


class EnumValidator(BaseValidator):
    """
    Validates that a field is the exact, case-sensitive literal of an enum member.

    Parameters:
        enum: The Enum class whose member values are the accepted literals
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        enum_cls = self.parameters.get("enum")
        if enum_cls is None or not issubclass(enum_cls, Enum):
            raise ValueError("EnumValidator requires an 'enum' parameter")
        self.members = {member.value: member for member in enum_cls}

    def validate(self, value: Any, record: Mapping[str, Any]) -> Enum:
        """
        Look the literal up.

        Raises:
            InvalidEnumValueError: If the literal is not a member value
        """
        try:
            return self.members[value]
        except (KeyError, TypeError):
            raise InvalidEnumValueError(self.field_name, value) from None
