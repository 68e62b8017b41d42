"""Pytest fixtures for all tests."""

import io

import pytest

from typeid.internal.logging import LogLevel, StructuredLogger


class FixedClock:
    """Clock that always reports the same millisecond."""

    def __init__(self, millis):
        self.millis = millis

    def now_millis(self):
        return self.millis


class FixedRandom:
    """Random source that repeats a single byte."""

    def __init__(self, byte=0xFF):
        self.byte = byte

    def token_bytes(self, n):
        return bytes([self.byte]) * n


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2023-06-21T20:39:38.615Z."""
    return FixedClock(1687379978615)


@pytest.fixture
def ones_random():
    """Random source returning only 1 bits."""
    return FixedRandom(0xFF)


@pytest.fixture
def zeros_random():
    """Random source returning only 0 bits."""
    return FixedRandom(0x00)


@pytest.fixture
def log_stream():
    """Route the shared logger into a buffer at DEBUG level."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    yield stream
    StructuredLogger.configure()
