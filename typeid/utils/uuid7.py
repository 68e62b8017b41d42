"""
UUIDv7 - time-ordered UUID.

Format: 48-bit Unix millisecond timestamp, 4-bit version (7), 12 random bits,
2-bit variant (0b10), 62 random bits. Byte order is big-endian, so values
generated later sort after earlier ones.
"""

from typeid.core.errors import InvalidTimestampError
from typeid.utils.sources import default_clock, default_random

MAX_TIMESTAMP_MS = (1 << 48) - 1


def generate(timestamp_ms=None, clock=None, rng=None):
    """Generate 16 UUIDv7 bytes for the given or current millisecond."""
    if timestamp_ms is None:
        timestamp_ms = (clock or default_clock).now_millis()
    elif isinstance(timestamp_ms, bool) or not isinstance(timestamp_ms, int):
        raise InvalidTimestampError(
            "Timestamp must be an integer number of milliseconds",
            input=timestamp_ms,
            expected="integer",
            actual=type(timestamp_ms).__name__,
            min=0,
            max=MAX_TIMESTAMP_MS,
        )

    if not 0 <= timestamp_ms <= MAX_TIMESTAMP_MS:
        raise InvalidTimestampError(
            f"Timestamp must be between 0 and {MAX_TIMESTAMP_MS}",
            input=timestamp_ms,
            expected=f"0 <= timestamp_ms <= {MAX_TIMESTAMP_MS}",
            actual=str(timestamp_ms),
            min=0,
            max=MAX_TIMESTAMP_MS,
        )

    # 10 bytes: 74 of the 80 bits survive the version and variant masks
    random_bytes = (rng or default_random).token_bytes(10)

    raw = bytearray(timestamp_ms.to_bytes(6, byteorder="big"))
    raw.append(0x70 | (random_bytes[0] & 0x0F))
    raw.append(random_bytes[1])
    raw.append(0x80 | (random_bytes[2] & 0x3F))
    raw.extend(random_bytes[3:10])
    return bytes(raw)


def timestamp_ms(data):
    """Millisecond timestamp stored in the first 6 bytes of a UUIDv7."""
    return int.from_bytes(data[:6], byteorder="big")
