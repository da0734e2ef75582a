"""
RequiredFieldValidator - ensures a field is present in the raw record.
"""

from collections.abc import Mapping
from typing import Any

from ypbank.core.errors import MissingFieldError

from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present.

    Empty strings are accepted (an empty description is a valid value);
    typed validators downstream reject empty numbers and literals.
    """

    def validate(self, value: Any, record: Mapping[str, Any]) -> Any:
        """
        Validate that the field is present.

        Raises:
            MissingFieldError: If the field is absent or None
        """
        if self.field_name not in record or value is None:
            raise MissingFieldError(self.field_name)
        return value
