"""
Unit tests for field validators and the record builder.

Includes property-based testing with hypothesis for the integer validator.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ypbank.core.errors import (
    CodecError,
    FieldConversionError,
    InvalidEnumValueError,
    MissingFieldError,
)
from ypbank.core.models import TxStatus, TxType
from ypbank.core.rules import RecordBuilder, build_record
from ypbank.core.rules.record_builder import DEFAULT_FIELD_RULES
from ypbank.core.validators import (
    BaseValidator,
    EnumValidator,
    RequiredFieldValidator,
    UnsignedIntValidator,
)


def raw_record(**overrides) -> dict[str, str]:
    raw = {
        "TX_ID": "1",
        "TX_TYPE": "DEPOSIT",
        "FROM_USER_ID": "0",
        "TO_USER_ID": "2",
        "AMOUNT": "100",
        "TIMESTAMP": "1633036860000",
        "STATUS": "SUCCESS",
        "DESCRIPTION": "Record number 1",
    }
    raw.update(overrides)
    return raw


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_present_field_passes(self):
        validator = RequiredFieldValidator("TX_ID")
        assert validator.validate("5", {"TX_ID": "5"}) == "5"

    def test_empty_string_is_present(self):
        validator = RequiredFieldValidator("DESCRIPTION")
        assert validator.validate("", {"DESCRIPTION": ""}) == ""

    def test_missing_field_raises_error(self):
        validator = RequiredFieldValidator("TX_TYPE")
        with pytest.raises(MissingFieldError) as exc_info:
            validator.validate(None, {"TX_ID": "5"})
        assert str(exc_info.value) == "missing key: TX_TYPE"
        assert exc_info.value.field_name == "TX_TYPE"


class TestUnsignedIntValidator:
    """Tests for UnsignedIntValidator"""

    def test_decimal_text(self):
        validator = UnsignedIntValidator("AMOUNT")
        assert validator.validate("100", {}) == 100

    def test_u64_max(self):
        validator = UnsignedIntValidator("AMOUNT")
        assert validator.validate("18446744073709551615", {}) == 2**64 - 1

    def test_overflow_raises_error(self):
        validator = UnsignedIntValidator("AMOUNT")
        with pytest.raises(FieldConversionError) as exc_info:
            validator.validate("18446744073709551616", {})
        assert "u64" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "-1", "+1", " 1", "1 ", "1_000", "abc", "1.5", "０"])
    def test_non_digits_raise_error(self, text):
        validator = UnsignedIntValidator("TX_ID")
        with pytest.raises(FieldConversionError) as exc_info:
            validator.validate(text, {})
        assert exc_info.value.field_name == "TX_ID"

    def test_custom_width(self):
        validator = UnsignedIntValidator("LEN", {"bits": 32})
        assert validator.validate("4294967295", {}) == 4294967295
        with pytest.raises(FieldConversionError):
            validator.validate("4294967296", {})

    def test_invalid_width_rejected(self):
        with pytest.raises(ValueError):
            UnsignedIntValidator("LEN", {"bits": 0})

    @given(st.integers(min_value=0, max_value=2**64 - 1))
    def test_property_all_u64_text_parses(self, value):
        """Property test: every u64 rendered as decimal parses back"""
        validator = UnsignedIntValidator("TX_ID")
        assert validator.validate(str(value), {}) == value


class TestEnumValidator:
    """Tests for EnumValidator"""

    def test_exact_literal(self):
        validator = EnumValidator("TX_TYPE", {"enum": TxType})
        assert validator.validate("WITHDRAWAL", {}) is TxType.WITHDRAWAL

    @pytest.mark.parametrize("text", ["deposit", "Deposit", " DEPOSIT", "REFUND", ""])
    def test_unknown_literal_raises_error(self, text):
        validator = EnumValidator("TX_TYPE", {"enum": TxType})
        with pytest.raises(InvalidEnumValueError) as exc_info:
            validator.validate(text, {})
        assert exc_info.value.field_name == "TX_TYPE"
        assert exc_info.value.value == text

    def test_requires_enum_parameter(self):
        with pytest.raises(ValueError):
            EnumValidator("STATUS")


class TestRecordBuilder:
    """Tests for RecordBuilder"""

    def test_build_valid_record(self):
        record = build_record(raw_record())
        assert record.tx_id == 1
        assert record.tx_type is TxType.DEPOSIT
        assert record.status is TxStatus.SUCCESS
        assert record.description == "Record number 1"

    @pytest.mark.parametrize("key", ["TX_ID", "TX_TYPE", "STATUS", "DESCRIPTION"])
    def test_missing_key_named(self, key):
        raw = raw_record()
        del raw[key]
        with pytest.raises(MissingFieldError) as exc_info:
            build_record(raw)
        assert str(exc_info.value) == f"missing key: {key}"

    def test_invalid_status(self):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            build_record(raw_record(STATUS="DONE"))
        assert exc_info.value.field_name == "STATUS"

    def test_invalid_amount(self):
        with pytest.raises(FieldConversionError) as exc_info:
            build_record(raw_record(AMOUNT="ten"))
        assert exc_info.value.field_name == "AMOUNT"

    def test_errors_are_codec_errors(self):
        with pytest.raises(CodecError):
            build_record(raw_record(TIMESTAMP="-5"))

    def test_unknown_rule_type_rejected(self):
        with pytest.raises(ValueError) as exc_info:
            RecordBuilder({"TX_ID": [{"type": "regex"}]})
        assert "Unknown rule type" in str(exc_info.value)

    def test_custom_validator_needs_only_validate(self):
        class UpperCaseValidator(BaseValidator):
            def validate(self, value, record):
                return value.upper()

        class CustomBuilder(RecordBuilder):
            VALIDATOR_REGISTRY = {**RecordBuilder.VALIDATOR_REGISTRY, "upper_case": UpperCaseValidator}

        rules = {**DEFAULT_FIELD_RULES, "DESCRIPTION": [{"type": "upper_case"}]}
        record = CustomBuilder(rules).build(raw_record())
        assert record.description == "RECORD NUMBER 1"
