"""Round-trip validation of JSON bodies against typed models."""

from typing import Any

import msgspec

from .compare import MAX_NESTING_DEPTH, StructuralComparator, nesting_depth
from .errors import DeserializeError, MismatchError, ParseError, RoundTripError
from .outcome import ValidationOutcome


class RoundTripValidator:
    """Checks that a typed model reproduces the JSON it was decoded from.

    The body is decoded twice: once into a generic JSON tree and once into
    the model. The model value is then encoded back to JSON and compared
    structurally with the generic tree. Fields the model does not know about
    are dropped by the decode and surface as a mismatch.
    """

    def __init__(
        self,
        model: Any,
        *,
        strict: bool = True,
        strict_numeric_types: bool = False,
    ) -> None:
        """Initializes the validator for one model type.

        Args:
            model (Any): Type to decode into, e.g. ``MinerData`` or
                ``list[ChainMain]``.
            strict (bool): If False, msgspec's lax decoding is used, which
                accepts e.g. numeric strings for integer fields. Defaults to True.
            strict_numeric_types (bool): If True, ``100`` and ``100.0`` compare
                as different. Defaults to False.
        """
        self.model = model
        self.strict = strict
        self._generic_decoder = msgspec.json.Decoder()
        self._model_decoder = msgspec.json.Decoder(type=model, strict=strict)
        self._encoder = msgspec.json.Encoder()
        self._comparator = StructuralComparator(strict_numeric_types)

    def check(self, json_text: str | bytes) -> Any:
        """Round-trip ``json_text`` through the model.

        Args:
            json_text (str | bytes): The raw JSON body.

        Returns:
            Any: The decoded model value.

        Raises:
            ParseError: If the body is not well-formed JSON or nests deeper
                than MAX_NESTING_DEPTH.
            DeserializeError: If the body does not fit the model.
            MismatchError: If re-encoding the model value changes the content.
        """
        try:
            original = self._generic_decoder.decode(json_text)
        except (msgspec.DecodeError, RecursionError) as exc:
            raise ParseError(str(exc)) from exc

        depth = nesting_depth(original)
        if depth > MAX_NESTING_DEPTH:
            raise ParseError(
                f"recursion limit exceeded; nesting depth {depth} is above {MAX_NESTING_DEPTH}"
            )

        try:
            typed = self._model_decoder.decode(json_text)
        except (msgspec.DecodeError, RecursionError) as exc:
            raise DeserializeError(str(exc)) from exc

        roundtripped = self._generic_decoder.decode(self._encoder.encode(typed))

        mismatch = self._comparator.compare(original, roundtripped)
        if mismatch is not None:
            raise MismatchError(mismatch)
        return typed

    def validate(self, json_text: str | bytes) -> ValidationOutcome:
        """Like ``check``, but reports failures as a ValidationOutcome."""
        try:
            self.check(json_text)
        except RoundTripError as exc:
            return ValidationOutcome.from_error(exc)
        return ValidationOutcome.ok()


def validate(json_text: str | bytes, model: Any, **kwargs: Any) -> ValidationOutcome:
    """Validate one body against ``model``; see RoundTripValidator for kwargs."""
    return RoundTripValidator(model, **kwargs).validate(json_text)
