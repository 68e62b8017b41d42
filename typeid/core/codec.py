"""Byte-level TypeID codec and UUID format conversions.

Works on raw 16-byte buffers for callers that bypass ``uuid.UUID``.
"""

import re
from uuid import UUID

from typeid.core.api import check_typeid
from typeid.core.errors import ErrorKind, ErrorRecord
from typeid.core.validation import SEPARATOR, prefix_error, uuid_bytes_error
from typeid.utils import base32

# 32 hex digits, optionally dashed as 8-4-4-4-12
HEX_UUID_RE = re.compile(
    r"[0-9a-fA-F]{32}|[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def encode(uuid_bytes, prefix=""):
    """Encode 16 raw bytes with an optional prefix into a TypeID string."""
    if prefix is None:
        prefix = ""
    error = prefix_error(prefix)
    if error:
        raise error.to_error(prefix=prefix)
    error = uuid_bytes_error(uuid_bytes)
    if error:
        raise error.to_error()

    suffix = base32.encode(bytes(uuid_bytes))
    return f"{prefix}{SEPARATOR}{suffix}" if prefix else suffix


def decode(typeid):
    """Decode a TypeID string into its 16 raw bytes."""
    parts, error = check_typeid(typeid)
    if error:
        raise error.to_error()
    return parts.uuid.bytes


def uuid_to_hex(uuid_bytes):
    """32 lowercase hex characters, no dashes."""
    error = uuid_bytes_error(uuid_bytes)
    if error:
        raise error.to_error()
    return bytes(uuid_bytes).hex()


def hex_to_uuid(hex_string):
    """16 bytes from a hex UUID, with or without dashes."""
    if not isinstance(hex_string, str) or not HEX_UUID_RE.fullmatch(hex_string):
        raise ErrorRecord(
            ErrorKind.INVALID_UUID,
            "UUID hex must be 32 hex digits, optionally in 8-4-4-4-12 form",
            hex_string,
            expected="32 hex digits",
            actual=repr(hex_string) if isinstance(hex_string, str) else type(hex_string).__name__,
        ).to_error()
    return bytes.fromhex(hex_string.replace("-", ""))


def uuid_to_bytes(value):
    if not isinstance(value, UUID):
        raise ErrorRecord(ErrorKind.INVALID_UUID, "UUID must be a uuid.UUID instance", value,
                          expected="uuid.UUID", actual=type(value).__name__).to_error()
    return value.bytes


def bytes_to_uuid(data):
    error = uuid_bytes_error(data)
    if error:
        raise error.to_error()
    return UUID(bytes=bytes(data))
