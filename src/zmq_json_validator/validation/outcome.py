"""Result values reported for each validated message."""

from enum import StrEnum
from typing import Self

import msgspec

from .errors import DeserializeError, MismatchError, ParseError, RoundTripError


class OutcomeKind(StrEnum):
    OK = "ok"
    PARSE_ERROR = "parse_error"
    DESERIALIZE_ERROR = "deserialize_error"
    MISMATCH = "mismatch"


_ERROR_KINDS: dict[type[RoundTripError], OutcomeKind] = {
    ParseError: OutcomeKind.PARSE_ERROR,
    DeserializeError: OutcomeKind.DESERIALIZE_ERROR,
    MismatchError: OutcomeKind.MISMATCH,
}


class ValidationOutcome(msgspec.Struct, frozen=True):
    """Outcome of round-tripping one message body.

    Attributes:
        kind (OutcomeKind): Success, or which step failed.
        detail (str): Error detail, empty on success.
        path (str | None): First differing path for mismatches.
    """

    kind: OutcomeKind
    detail: str = ""
    path: str | None = None

    @classmethod
    def ok(cls) -> Self:
        return cls(kind=OutcomeKind.OK)

    @classmethod
    def from_error(cls, error: RoundTripError) -> Self:
        """Build a failed outcome from a raised round-trip error.

        Args:
            error (RoundTripError): The error raised by the validator.

        Raises:
            TypeError: If ``error`` is not one of the known failure kinds.
        """
        kind = _ERROR_KINDS.get(type(error))
        if kind is None:
            raise TypeError(
                f"Invalid error type; expected ParseError, DeserializeError or "
                f"MismatchError but got {type(error).__name__}"
            )
        path = error.path if isinstance(error, MismatchError) else None
        return cls(kind=kind, detail=str(error), path=path)

    @property
    def is_ok(self) -> bool:
        return self.kind == OutcomeKind.OK

    def describe(self) -> str:
        match self.kind:
            case OutcomeKind.OK:
                return "round trip OK"
            case OutcomeKind.PARSE_ERROR:
                return f"invalid JSON: {self.detail}"
            case OutcomeKind.DESERIALIZE_ERROR:
                return f"does not match model: {self.detail}"
            case OutcomeKind.MISMATCH:
                return f"round trip mismatch: {self.detail}"
