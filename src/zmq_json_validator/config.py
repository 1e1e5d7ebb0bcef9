"""Runtime configuration for the validator."""

from typing import Self

from msgspec import Struct

from .logging import LogLevel

DEFAULT_ENDPOINT = "tcp://127.0.0.1:18084"
ENDPOINT_ENV_VAR = "ZMQ_PUB"


class ValidatorConfig(Struct):
    """Top-level configuration for a validation run.

    Attributes:
        endpoint: Publisher endpoint, including the transport scheme.
        subscribe_filter: Topic prefix to subscribe to; empty means everything.
        rcv_hwm: Receive high-water mark of the subscription socket.
        strict_decoding: If False, lax decoding accepts e.g. numeric strings
            for integer fields.
        strict_numeric_types: If True, ``100`` and ``100.0`` compare unequal.
        log_level: Minimum level of operational log messages.
        log_file: Optional ``.txt`` file to append log messages to.
    """

    endpoint: str = DEFAULT_ENDPOINT
    subscribe_filter: str = ""
    rcv_hwm: int = 100_000
    strict_decoding: bool = True
    strict_numeric_types: bool = False
    log_level: LogLevel = LogLevel.INFO
    log_file: str | None = None

    def __post_init__(self) -> None:
        """Validate the endpoint, socket and log file settings."""
        if not self.endpoint:
            raise ValueError("endpoint must be non-empty")
        if "://" not in self.endpoint:
            raise ValueError(
                f"Invalid endpoint; expected '<transport>://<address>' but got {self.endpoint}"
            )
        if self.rcv_hwm <= 0:
            raise ValueError(f"Invalid rcv_hwm; expected >0 but got {self.rcv_hwm}")
        if self.log_file is not None and not self.log_file.endswith(".txt"):
            raise ValueError(
                f"Invalid log_file; expected path ending with '.txt' but got {self.log_file}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return the default configuration for a local node."""
        return cls(endpoint=DEFAULT_ENDPOINT)
