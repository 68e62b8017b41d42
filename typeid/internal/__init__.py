from typeid.utils.timestamp import now_millis, format_timestamp
from typeid.internal.logging import LogLevel, StructuredLogger, get_logger

__all__ = [
    "now_millis",
    "format_timestamp",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
