"""Synchronous buffered logger."""

import sys
import time
import traceback
from datetime import datetime, timezone

from zmq_json_validator.logging.config import LoggerConfig, LogLevel
from zmq_json_validator.logging.handlers import BaseLogHandler


def _time_iso8601() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


class Logger:
    """A simple logger that buffers messages and pushes them to configured
    handlers.

    Everything runs on the caller's thread; there is no background flusher.
    A line at or above the configured flush level is pushed at once, along
    with anything buffered before it. Lower-severity lines wait for the size
    or age trigger; age is only checked when the next line is logged.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stdout, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler class; expected BaseLogHandler but got {type(handler).__name__}"
                )
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._buffer_start_time_s = time.monotonic()
        self._is_running = True

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def _flush_buffer(self) -> None:
        """Flushes the log message buffer to all handlers."""
        if not self._buffer:
            return

        buffer, self._buffer = self._buffer, []
        self._buffer_start_time_s = time.monotonic()

        for handler in self._handlers:
            try:
                handler.push(buffer)
            except Exception:
                traceback.print_exc(file=sys.stderr)

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Formats a log message, echoes it and adds it to the buffer.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        try:
            log_msg = self._config.str_format % {
                "asctime": _time_iso8601(),
                "name": self._name,
                "levelname": level.name,
                "message": msg,
            }
        except (KeyError, TypeError, ValueError):
            traceback.print_exc(file=sys.stderr)
            return

        if self._config.do_stout:
            print(log_msg, flush=True)

        self._buffer.append(log_msg)

        is_buffer_full = len(self._buffer) >= self._config.buffer_size
        is_buffer_old = (
            time.monotonic() - self._buffer_start_time_s
        ) >= self._config.flush_interval_s
        if level >= self._config.flush_level or is_buffer_full or is_buffer_old:
            self._flush_buffer()

    def _is_enabled(self, level: LogLevel) -> bool:
        return self._is_running and self._config.base_level <= level

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        if self._is_enabled(LogLevel.TRACE):
            self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        if self._is_enabled(LogLevel.DEBUG):
            self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        if self._is_enabled(LogLevel.INFO):
            self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        if self._is_enabled(LogLevel.WARNING):
            self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        if self._is_enabled(LogLevel.ERROR):
            self._process_log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flush any buffered messages and close all handlers."""
        if not self._is_running:
            return
        self._flush_buffer()
        self._is_running = False
        for handler in self._handlers:
            handler.close()
