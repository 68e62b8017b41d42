"""TypeID v0.3.0: type-prefixed, K-sortable identifiers."""

from typeid.core.api import TypeIDParts, check_typeid, create, explain, is_valid, normalize_prefix, parse
from typeid.core.errors import (
    ErrorKind,
    ErrorRecord,
    InvalidFormatError,
    InvalidInputTypeError,
    InvalidLengthError,
    InvalidPrefixError,
    InvalidSuffixError,
    InvalidTimestampError,
    InvalidUUIDError,
    TypeIDError,
)

__version__ = "0.3.0"

__all__ = [
    "TypeIDParts",
    "check_typeid",
    "create",
    "explain",
    "is_valid",
    "normalize_prefix",
    "parse",
    "ErrorKind",
    "ErrorRecord",
    "InvalidFormatError",
    "InvalidInputTypeError",
    "InvalidLengthError",
    "InvalidPrefixError",
    "InvalidSuffixError",
    "InvalidTimestampError",
    "InvalidUUIDError",
    "TypeIDError",
]
