"""
Validation predicates for prefixes, suffixes, TypeID strings and UUID bytes.

The ``valid_*`` predicates never raise. The ``*_error`` helpers and
``split_typeid`` return ErrorRecords so callers can report which check failed.

TypeID string pipeline, first failure wins:
    input type -> length -> case -> separator -> prefix -> suffix
"""

import re

from typeid.core.errors import ErrorKind, ErrorRecord
from typeid.utils.base32 import SUFFIX_LENGTH, UUID_LENGTH, suffix_error

MAX_PREFIX_LENGTH = 63
MIN_TYPEID_LENGTH = SUFFIX_LENGTH
MAX_TYPEID_LENGTH = MAX_PREFIX_LENGTH + 1 + SUFFIX_LENGTH
SEPARATOR = "_"

# Letters and underscore only; no leading or trailing underscore
PREFIX_RE = re.compile(r"[a-z]([a-z_]{0,61}[a-z])?")


def prefix_error(prefix, input=None):
    """Return the ErrorRecord for an invalid prefix, None when valid."""
    if input is None:
        input = prefix

    if not isinstance(prefix, str):
        return ErrorRecord(ErrorKind.INVALID_PREFIX, "Prefix must be a string", input,
                           expected="string", actual=type(prefix).__name__)
    if prefix == "":
        return None
    if len(prefix) > MAX_PREFIX_LENGTH:
        return ErrorRecord(ErrorKind.INVALID_PREFIX,
                           f"Prefix must be at most {MAX_PREFIX_LENGTH} characters",
                           input, expected=f"at most {MAX_PREFIX_LENGTH} characters",
                           actual=f"{len(prefix)} characters")
    if prefix.startswith(SEPARATOR) or prefix.endswith(SEPARATOR):
        return ErrorRecord(ErrorKind.INVALID_PREFIX,
                           "Prefix must not start or end with an underscore",
                           input, expected="prefix starting and ending with a-z",
                           actual=repr(prefix))
    if not PREFIX_RE.fullmatch(prefix):
        return ErrorRecord(ErrorKind.INVALID_PREFIX,
                           "Prefix must contain only lowercase letters a-z and underscores",
                           input, expected="[a-z]([a-z_]{0,61}[a-z])?",
                           actual=repr(prefix))
    return None


def uuid_bytes_error(value):
    """Return the ErrorRecord for a value that is not 16 raw bytes."""
    if not isinstance(value, (bytes, bytearray)):
        return ErrorRecord(ErrorKind.INVALID_UUID, "UUID must be a bytes object", value,
                           expected="bytes", actual=type(value).__name__)
    if len(value) != UUID_LENGTH:
        return ErrorRecord(ErrorKind.INVALID_UUID, "UUID must be exactly 16 bytes", value,
                           expected="16 bytes", actual=f"{len(value)} bytes")
    return None


def split_typeid(value):
    """Validate a TypeID string and split it.

    Returns ``((prefix, suffix), None)`` on success and ``(None, record)`` on
    the first failing check. The separator is the last underscore: the suffix
    alphabet has none, so every other underscore belongs to the prefix.
    """
    if not isinstance(value, str):
        return None, ErrorRecord(ErrorKind.INVALID_INPUT_TYPE, "TypeID must be a string", value,
                                 expected="string", actual=type(value).__name__)

    if not MIN_TYPEID_LENGTH <= len(value) <= MAX_TYPEID_LENGTH:
        return None, ErrorRecord(
            ErrorKind.INVALID_LENGTH,
            f"TypeID must be between {MIN_TYPEID_LENGTH} and {MAX_TYPEID_LENGTH} characters",
            value,
            expected=f"{MIN_TYPEID_LENGTH}-{MAX_TYPEID_LENGTH} characters",
            actual=f"{len(value)} characters",
        )

    if value != value.lower():
        return None, ErrorRecord(ErrorKind.INVALID_FORMAT, "TypeID must be lowercase", value,
                                 expected="lowercase", actual="contains uppercase characters")

    index = value.rfind(SEPARATOR)
    if index == -1:
        prefix, suffix = "", value
    elif index == 0:
        return None, ErrorRecord(ErrorKind.INVALID_FORMAT,
                                 "Separator must not be present when the prefix is empty",
                                 value, expected="prefix before '_'", actual="leading '_'")
    else:
        prefix, suffix = value[:index], value[index + 1:]

    error = prefix_error(prefix, input=value)
    if error:
        return None, error

    error = suffix_error(suffix, input=value)
    if error:
        return None, error

    return (prefix, suffix), None


def valid_prefix(value):
    return prefix_error(value) is None


def valid_suffix(value):
    return suffix_error(value) is None


def valid_typeid_string(value):
    return split_typeid(value)[1] is None


def valid_uuid_bytes(value):
    return uuid_bytes_error(value) is None


def valid_uuidv7_bytes(value):
    """16 bytes with version nibble 7 and RFC 4122 variant bits."""
    if not valid_uuid_bytes(value):
        return False
    return (value[6] >> 4) == 0x7 and (value[8] >> 6) == 0b10
