"""Create, parse and explain TypeIDs.

``check_typeid`` is the single validation pipeline. ``explain`` returns its
error as data, ``parse`` raises it.
"""

from enum import Enum
from uuid import UUID

from typeid.core.errors import ErrorKind, ErrorRecord
from typeid.core.validation import SEPARATOR, prefix_error, split_typeid
from typeid.internal.logging import get_logger
from typeid.utils import base32, uuid7


class TypeIDParts:
    """Components of a parsed TypeID."""

    __slots__ = ("prefix", "suffix", "uuid", "typeid")

    def __init__(self, prefix, suffix, uuid, typeid):
        self.prefix = prefix
        self.suffix = suffix
        self.uuid = uuid
        self.typeid = typeid

    def to_dict(self):
        return {
            "prefix": self.prefix,
            "suffix": self.suffix,
            "uuid": self.uuid,
            "typeid": self.typeid,
        }

    def __eq__(self, other):
        if not isinstance(other, TypeIDParts):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.typeid)

    def __repr__(self):
        return f"TypeIDParts(prefix={self.prefix!r}, suffix={self.suffix!r}, uuid={self.uuid!r})"


def normalize_prefix(prefix):
    """Map None, str or Enum members to a prefix string.

    Returns ``(prefix, None)`` or ``(None, record)``. Enum members contribute
    their value when it is a string, their name otherwise.
    """
    if prefix is None:
        return "", None
    original = prefix
    if isinstance(prefix, Enum):
        prefix = prefix.value if isinstance(prefix.value, str) else prefix.name
    if not isinstance(prefix, str):
        return None, ErrorRecord(ErrorKind.INVALID_PREFIX,
                                 "Prefix must be a string, an Enum member or None", prefix,
                                 expected="str, Enum or None", actual=type(prefix).__name__)
    error = prefix_error(prefix, input=original)
    return (None, error) if error else (prefix, None)


def check_typeid(value):
    """Run the parse pipeline. Returns ``(parts, None)`` or ``(None, record)``."""
    split, error = split_typeid(value)
    if error:
        return None, error

    prefix, suffix = split
    return TypeIDParts(prefix, suffix, UUID(bytes=base32.decode(suffix)), value), None


def explain(value):
    """Return None for a valid TypeID, else the first failing ErrorRecord. Never raises."""
    return check_typeid(value)[1]


def is_valid(value):
    return explain(value) is None


def parse(typeid):
    """Parse a TypeID string into its components, raising TypeIDError when invalid."""
    parts, error = check_typeid(typeid)
    if error:
        _reject("parse", error)
    return parts


def create(prefix=None, uuid=None):
    """Build a TypeID from an optional prefix and an optional UUID.

    Without a UUID a fresh UUIDv7 is generated. A given UUID may be of any
    version, including the nil and max UUIDs, and is encoded unmodified.
    """
    normalized, error = normalize_prefix(prefix)
    if error:
        _reject("create", error, prefix=prefix)
    prefix = normalized

    if uuid is None:
        data = uuid7.generate()
    elif isinstance(uuid, UUID):
        data = uuid.bytes
    else:
        _reject("create", ErrorRecord(ErrorKind.INVALID_UUID, "UUID must be a uuid.UUID instance",
                                      uuid, expected="uuid.UUID", actual=type(uuid).__name__))

    suffix = base32.encode(data)
    return f"{prefix}{SEPARATOR}{suffix}" if prefix else suffix


def _reject(operation, record, **kwargs):
    get_logger().debug("typeid rejected", op=operation, kind=record.kind.value, input=record.input)
    raise record.to_error(**kwargs)
