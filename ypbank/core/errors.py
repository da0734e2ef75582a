"""
Error taxonomy for the record codecs.

Every data error derives from CodecError (a ValueError), so callers only need
to tell "malformed input data" (CodecError) from "I/O failure" (OSError).
I/O errors raised by the byte source or sink are never wrapped.
"""


class CodecError(ValueError):
    """Raised when input bytes or records cannot be decoded or encoded."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FrameError(CodecError):
    """Malformed binary framing."""


class InvalidMagicError(FrameError):
    """Frame header does not start with the expected magic constant."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid magic: expected 0x{expected:08X}, got 0x{actual:08X}")


class TruncatedStreamError(FrameError):
    """Stream ended before a header or body was complete."""

    def __init__(self, section: str, expected: int, actual: int):
        self.section = section
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"truncated {section}: expected {expected} bytes, got {actual}"
        )


class TruncatedDescriptionError(FrameError):
    """Frame body holds fewer description bytes than declared."""

    def __init__(self, need: int, have: int):
        self.need = need
        self.have = have
        super().__init__(f"not enough bytes for description: need {need}, have {have}")


class LengthMismatchError(CodecError):
    """Declared length disagrees with the bytes actually carried."""

    def __init__(self, declared: int, actual: int, what: str = "description"):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"{what} length mismatch: declared {declared}, actual {actual}"
        )


class InvalidEnumValueError(CodecError):
    """Code or literal outside a closed enumeration."""

    def __init__(self, field_name: str, value: object):
        self.field_name = field_name
        self.value = value
        super().__init__(f"invalid enum value for {field_name}: {value!r}")


class MissingFieldError(CodecError):
    """A required field is absent from a block or row."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"missing key: {field_name}")


class MalformedLineError(CodecError):
    """A text line or row does not have the expected shape."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class FieldConversionError(CodecError):
    """A field value cannot be converted to its declared type."""

    def __init__(self, field_name: str, value: object, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"cannot convert {field_name}={value!r}: {reason}")


class TextDecodingError(CodecError):
    """Bytes that must be UTF-8 are not."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid UTF-8 input: {reason}")
