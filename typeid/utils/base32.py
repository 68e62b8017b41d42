"""
Crockford base32, lowercase, as used by TypeID suffixes.

A 16-byte UUID is read as one big-endian 128-bit integer and written as 26
five-bit symbols. 26 * 5 = 130 bits, so the two top bits are always zero and
the first symbol of any valid suffix is in 0-7.
"""

from typeid.core.errors import ErrorKind, ErrorRecord, InvalidUUIDError

# Crockford alphabet: no i, l, o, u
ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
SUFFIX_LENGTH = 26
UUID_LENGTH = 16

_VALUES = {char: value for value, char in enumerate(ALPHABET)}
_MAX_FIRST_VALUE = 7


def encode(data):
    """Encode 16 bytes as a 26-character suffix."""
    if not isinstance(data, (bytes, bytearray)) or len(data) != UUID_LENGTH:
        raise InvalidUUIDError(
            "UUID must be exactly 16 bytes",
            input=data,
            expected="16 bytes",
            actual=_describe_buffer(data),
        )

    n = int.from_bytes(data, byteorder="big")

    chars = []
    for _ in range(SUFFIX_LENGTH):
        n, remainder = divmod(n, 32)
        chars.append(ALPHABET[remainder])

    return "".join(reversed(chars))


def decode(suffix):
    """Decode a 26-character suffix back into 16 bytes."""
    error = suffix_error(suffix)
    if error:
        raise error.to_error()

    n = 0
    for char in suffix:
        n = (n << 5) | _VALUES[char]

    return n.to_bytes(UUID_LENGTH, byteorder="big")


def suffix_error(suffix, input=None):
    """Return the ErrorRecord for an invalid suffix, None when it decodes."""
    if input is None:
        input = suffix

    if not isinstance(suffix, str):
        return ErrorRecord(ErrorKind.INVALID_SUFFIX, "Suffix must be a string", input,
                           expected="string", actual=type(suffix).__name__)

    if len(suffix) != SUFFIX_LENGTH:
        return ErrorRecord(ErrorKind.INVALID_SUFFIX,
                           f"Suffix must be exactly {SUFFIX_LENGTH} characters",
                           input, expected=f"{SUFFIX_LENGTH} characters",
                           actual=f"{len(suffix)} characters")

    for position, char in enumerate(suffix):
        if char not in _VALUES:
            return ErrorRecord(ErrorKind.INVALID_SUFFIX,
                               f"Suffix contains invalid character {char!r} at position {position}",
                               input, expected=f"characters from {ALPHABET}",
                               actual=repr(char))

    if _VALUES[suffix[0]] > _MAX_FIRST_VALUE:
        return ErrorRecord(ErrorKind.INVALID_SUFFIX,
                           "Suffix overflow: value exceeds 128 bits",
                           input, expected="first character in 0-7",
                           actual=repr(suffix[0]))

    return None


def _describe_buffer(data):
    if isinstance(data, (bytes, bytearray)):
        return f"{len(data)} bytes"
    return type(data).__name__
