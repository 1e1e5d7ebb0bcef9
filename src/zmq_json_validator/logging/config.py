"""Configuration classes and enums for logging."""

from enum import IntEnum
from typing import Self

from msgspec import Struct


class LogLevel(IntEnum):
    """Log level enumeration."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class LoggerConfig(Struct):
    """Configuration for the logger.

    The validator spends most of its time blocked in a receive call, and
    nothing flushes the buffer while it waits. Lines at or above
    ``flush_level`` are therefore pushed as soon as they are logged, and
    only low-severity chatter waits for the size or age triggers.

    Attributes:
        base_level: The minimum log level that will be logged.
        do_stout: If True, logs are also printed to stdout.
        str_format: Format string for log lines. Supports %(asctime)s,
            %(levelname)s, %(name)s and %(message)s; the latter is required.
        flush_interval_s: Age of the oldest buffered line, checked on each
            log call, after which the buffer is pushed. Must be > 0.
        buffer_size: Number of buffered lines that forces a push. Must be > 0.
        flush_level: Lines at or above this level are pushed immediately,
            together with anything buffered before them.
    """

    base_level: LogLevel = LogLevel.INFO
    do_stout: bool = True
    str_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    flush_interval_s: float = 1.0
    buffer_size: int = 256
    flush_level: LogLevel = LogLevel.WARNING

    def __post_init__(self) -> None:
        if self.flush_interval_s <= 0.0:
            raise ValueError(
                f"Invalid flush interval; expected >0 but got {self.flush_interval_s}"
            )
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )

    @classmethod
    def quiet(cls, base_level: LogLevel = LogLevel.WARNING) -> Self:
        """Return a config that keeps log lines off stdout."""
        return cls(base_level=base_level, do_stout=False)
