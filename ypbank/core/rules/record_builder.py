"""
Record builder for orchestrating field validators on raw text records.

Both text codecs collect a record as a mapping of KEY -> text. The builder
applies the field rules in canonical field order and produces a
TransactionRecord, failing on the first violated rule.
"""

from collections.abc import Mapping
from typing import Any

from ypbank.core.models import FIELD_NAMES, TransactionRecord, TxStatus, TxType
from ypbank.core.validators import (
    BaseValidator,
    EnumValidator,
    RequiredFieldValidator,
    UnsignedIntValidator,
)

# Rules applied to every field, in order. Every field is required first.
DEFAULT_FIELD_RULES: dict[str, list[dict[str, Any]]] = {
    "TX_ID": [{"type": "unsigned_int"}],
    "TX_TYPE": [{"type": "enum", "params": {"enum": TxType}}],
    "FROM_USER_ID": [{"type": "unsigned_int"}],
    "TO_USER_ID": [{"type": "unsigned_int"}],
    "AMOUNT": [{"type": "unsigned_int"}],
    "TIMESTAMP": [{"type": "unsigned_int"}],
    "STATUS": [{"type": "enum", "params": {"enum": TxStatus}}],
    "DESCRIPTION": [],
}


class RecordBuilder:
    """
    Orchestrates field validators on raw text records.

    Unlike a data-quality pass, the builder never collects failures: the first
    failing rule raises and the caller abandons the whole record set.
    """

    VALIDATOR_REGISTRY = {
        "required_field": RequiredFieldValidator,
        "unsigned_int": UnsignedIntValidator,
        "enum": EnumValidator,
    }

    def __init__(self, field_rules: dict[str, list[dict[str, Any]]] | None = None):
        """
        Initialize the builder.

        Args:
            field_rules: Mapping of KEY -> list of rule dicts ({"type", "params"});
                         defaults to DEFAULT_FIELD_RULES
        """
        self.field_rules = field_rules or DEFAULT_FIELD_RULES
        self.validators: list[tuple[str, list[BaseValidator]]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator chains in canonical field order."""
        for field_name in FIELD_NAMES:
            chain: list[BaseValidator] = [RequiredFieldValidator(field_name)]
            for rule in self.field_rules.get(field_name, []):
                validator_class = self.VALIDATOR_REGISTRY.get(rule["type"])
                if not validator_class:
                    raise ValueError(f"Unknown rule type: {rule['type']}")
                chain.append(validator_class(field_name, rule.get("params")))
            self.validators.append((field_name, chain))

    def build(self, raw: Mapping[str, Any]) -> TransactionRecord:
        """
        Validate a raw record and build a TransactionRecord.

        Args:
            raw: Mapping of KEY -> raw value

        Returns:
            The typed record

        Raises:
            CodecError: On the first failing rule
        """
        values: dict[str, Any] = {}
        for field_name, chain in self.validators:
            value = raw.get(field_name)
            for validator in chain:
                value = validator.validate(value, raw)
            values[field_name.lower()] = value
        return TransactionRecord(**values)


_default_builder: RecordBuilder | None = None


def build_record(raw: Mapping[str, Any]) -> TransactionRecord:
    """Build a record with the default field rules."""
    global _default_builder
    if _default_builder is None:
        _default_builder = RecordBuilder()
    return _default_builder.build(raw)
