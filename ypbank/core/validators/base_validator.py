"""
Base validator interface for text field validators.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseValidator(ABC):
    """
    Abstract base class for all field validators.

    A validator receives the raw text value of one field (and the whole raw
    record for context) and either returns the typed value or raises a
    CodecError subclass.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate (e.g. "TX_ID")
            parameters: Validator-specific parameters
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, value: Any, record: Mapping[str, Any]) -> Any:
        """
        Validate a value and return it converted.

        Args:
            value: The raw field value
            record: The entire raw record

        Returns:
            The converted value

        Raises:
            CodecError: If validation fails
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
