"""Clock and secure random sources used by the UUIDv7 generator.

Anything with a ``now_millis()`` method can stand in for the clock and
anything with a ``token_bytes(n)`` method for the random source, which is
how tests pin both down.
"""

import secrets

from typeid.utils.timestamp import now_millis


class SystemClock:
    """Wall clock in Unix milliseconds."""

    def now_millis(self):
        return now_millis()


class SecureRandomSource:
    """CSPRNG backed by the ``secrets`` module."""

    def token_bytes(self, n):
        return secrets.token_bytes(n)


default_clock = SystemClock()
default_random = SecureRandomSource()
