"""Failure kinds raised while round-tripping a single message."""

from .compare import Mismatch


class RoundTripError(Exception):
    """Base class for per-message round-trip failures."""


class ParseError(RoundTripError):
    """The body is not well-formed JSON."""


class DeserializeError(RoundTripError):
    """The body is valid JSON but does not fit the typed model."""


class MismatchError(RoundTripError):
    """Re-serializing the typed value produced different JSON content."""

    def __init__(self, mismatch: Mismatch) -> None:
        self.mismatch = mismatch
        self.path = mismatch.path
        self.reason = mismatch.reason
        super().__init__(f"{mismatch.reason} at {mismatch.display_path}")
