"""Unit tests for UUIDv7 generation."""

from uuid import UUID

import pytest

from typeid.core.errors import InvalidTimestampError
from typeid.core.validation import valid_uuidv7_bytes
from typeid.utils import uuid7
from typeid.utils.sources import SecureRandomSource, SystemClock


class TestGenerate:
    """Tests for uuid7.generate."""

    def test_returns_16_bytes(self):
        """Generated value is a 16-byte buffer."""
        data = uuid7.generate()
        assert isinstance(data, bytes)
        assert len(data) == 16

    def test_version_and_variant(self):
        """Version nibble is 7 and variant bits are 0b10."""
        data = uuid7.generate()
        assert data[6] >> 4 == 7
        assert data[8] >> 6 == 0b10
        assert valid_uuidv7_bytes(data)
        assert UUID(bytes=data).version == 7

    def test_embeds_timestamp(self):
        """First 6 bytes hold the millisecond timestamp."""
        data = uuid7.generate(1687379978615)
        assert uuid7.timestamp_ms(data) == 1687379978615
        assert data[:6].hex() == "0188dfaf2977"

    def test_uses_clock(self, fixed_clock):
        """Omitted timestamp comes from the clock."""
        data = uuid7.generate(clock=fixed_clock)
        assert uuid7.timestamp_ms(data) == fixed_clock.millis

    def test_random_bits_masked(self, ones_random):
        """All-ones randomness leaves version and variant intact."""
        data = uuid7.generate(0, rng=ones_random)
        assert data.hex() == "0000000000007fffbfffffffffffffff"

    def test_random_bits_zero(self, zeros_random):
        """All-zeros randomness only leaves version and variant set."""
        data = uuid7.generate(0, rng=zeros_random)
        assert data.hex() == "00000000000070008000000000000000"

    def test_same_timestamp_differs(self):
        """Randomness separates values within one millisecond."""
        values = {uuid7.generate(1000) for _ in range(100)}
        assert len(values) == 100

    def test_sortable(self):
        """Later timestamps sort after earlier ones."""
        values = [uuid7.generate(ts) for ts in (0, 1, 1000, 1687379978615, uuid7.MAX_TIMESTAMP_MS)]
        assert values == sorted(values)

    def test_timestamp_bounds_accepted(self):
        """0 and 2**48 - 1 are both valid timestamps."""
        assert uuid7.timestamp_ms(uuid7.generate(0)) == 0
        assert uuid7.timestamp_ms(uuid7.generate(uuid7.MAX_TIMESTAMP_MS)) == uuid7.MAX_TIMESTAMP_MS

    @pytest.mark.parametrize("timestamp", [-1, 1 << 48])
    def test_timestamp_out_of_range(self, timestamp):
        """Timestamps outside 48 bits are rejected with min/max."""
        with pytest.raises(InvalidTimestampError) as exc_info:
            uuid7.generate(timestamp)
        error = exc_info.value
        assert error.kind.value == "invalid-timestamp"
        assert error.context == {"min": 0, "max": uuid7.MAX_TIMESTAMP_MS}
        assert error.input == timestamp

    @pytest.mark.parametrize("timestamp", [1.5, "1000", True])
    def test_timestamp_wrong_type(self, timestamp):
        """Only integers are accepted as timestamps."""
        with pytest.raises(InvalidTimestampError):
            uuid7.generate(timestamp)


class TestSources:
    """Tests for the default clock and random source."""

    def test_system_clock_reasonable(self):
        """System clock reports milliseconds after 2020."""
        assert SystemClock().now_millis() > 1577836800000

    def test_secure_random_length(self):
        """Random source returns the requested number of bytes."""
        assert len(SecureRandomSource().token_bytes(10)) == 10
