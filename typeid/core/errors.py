"""TypeID error taxonomy: records as data, exceptions when raised."""

from enum import Enum

from typeid.utils.timestamp import format_timestamp


class ErrorKind(Enum):
    INVALID_INPUT_TYPE = "invalid-input-type"
    INVALID_LENGTH = "invalid-length"
    INVALID_FORMAT = "invalid-format"
    INVALID_PREFIX = "invalid-prefix"
    INVALID_SUFFIX = "invalid-suffix"
    INVALID_UUID = "invalid-uuid"
    INVALID_TIMESTAMP = "invalid-timestamp"


class ErrorRecord:
    """First failing check of a TypeID pipeline, as a plain value."""

    __slots__ = ("kind", "message", "input", "expected", "actual")

    def __init__(self, kind, message, input, expected=None, actual=None):
        self.kind = kind
        self.message = message
        self.input = input
        self.expected = expected
        self.actual = actual

    def to_dict(self):
        record = {"kind": self.kind.value, "message": self.message, "input": self.input}
        if self.expected is not None:
            record["expected"] = self.expected
        if self.actual is not None:
            record["actual"] = self.actual
        return record

    def to_error(self, **kwargs):
        """Build the exception matching this record's kind."""
        error_cls = _ERRORS_BY_KIND[self.kind]
        return error_cls(self.message, input=self.input, expected=self.expected,
                         actual=self.actual, **kwargs)

    def __eq__(self, other):
        if not isinstance(other, ErrorRecord):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self):
        return hash((self.kind, self.message, self.expected, self.actual))

    def __repr__(self):
        return f"ErrorRecord(kind={self.kind.value!r}, message={self.message!r}, input={self.input!r})"


class TypeIDError(ValueError):
    """Base error carrying the structured record plus tracking context."""

    kind = None

    def __init__(self, message, input=None, expected=None, actual=None, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.input = input
        self.expected = expected
        self.actual = actual
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    @property
    def record(self):
        return ErrorRecord(self.kind, self.message, self.input, self.expected, self.actual)

    def __str__(self):
        return f"[{self.kind.value}] {self.message}"


class InvalidInputTypeError(TypeIDError):
    """Input is not a string."""

    kind = ErrorKind.INVALID_INPUT_TYPE


class InvalidLengthError(TypeIDError):
    """TypeID string is shorter than 26 or longer than 90 characters."""

    kind = ErrorKind.INVALID_LENGTH


class InvalidFormatError(TypeIDError):
    """Uppercase characters or a misplaced separator."""

    kind = ErrorKind.INVALID_FORMAT


class InvalidPrefixError(TypeIDError):
    """Prefix breaks the ``[a-z]([a-z_]*[a-z])?`` grammar or is too long."""

    kind = ErrorKind.INVALID_PREFIX

    def __init__(self, message, prefix=None, **kwargs):
        context = kwargs.pop("context", {})
        if prefix is not None:
            context["prefix"] = prefix
        super().__init__(message, context=context, **kwargs)


class InvalidSuffixError(TypeIDError):
    """Suffix has the wrong length, alphabet, or overflows 128 bits."""

    kind = ErrorKind.INVALID_SUFFIX


class InvalidUUIDError(TypeIDError):
    """Value is not a UUID or not exactly 16 bytes."""

    kind = ErrorKind.INVALID_UUID


class InvalidTimestampError(TypeIDError):
    """UUIDv7 timestamp outside the 48-bit range."""

    kind = ErrorKind.INVALID_TIMESTAMP

    def __init__(self, message, min=None, max=None, **kwargs):
        context = kwargs.pop("context", {})
        if min is not None:
            context["min"] = min
        if max is not None:
            context["max"] = max
        super().__init__(message, context=context, **kwargs)


_ERRORS_BY_KIND = {error_cls.kind: error_cls for error_cls in (
    InvalidInputTypeError,
    InvalidLengthError,
    InvalidFormatError,
    InvalidPrefixError,
    InvalidSuffixError,
    InvalidUUIDError,
    InvalidTimestampError,
)}
