"""Per-message pipeline: split, display, dispatch and validate.

Everything here is pure and synchronous given the raw message, so it can be
driven from in-memory strings without a live feed.
"""

from collections.abc import Callable

import msgspec

from .config import ValidatorConfig
from .dispatch import DecodedMessage, MessageType, model_for, resolve, split_message
from .formatting import format_json
from .logging import Logger, LoggerConfig
from .stats import ProcessorStats
from .validation import RoundTripValidator, ValidationOutcome


class ProcessResult(msgspec.Struct, frozen=True):
    """What happened to one message.

    Attributes:
        message: The split wire message.
        msg_type: Resolved type, or None if the label is unknown.
        outcome: Validation outcome, or None if no model applied.
    """

    message: DecodedMessage
    msg_type: MessageType | None
    outcome: ValidationOutcome | None


class MessageProcessor:
    """Handles one wire message at a time and reports on it."""

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        logger: Logger | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize the processor.

        Args:
            config: Validation settings. Defaults to ValidatorConfig.default().
            logger: Logger for operational events. Defaults to a quiet logger
                that only keeps warnings and errors.
            output: Sink for the human-facing report lines. Defaults to print.
        """
        self._config = config if config is not None else ValidatorConfig.default()
        self._logger = logger
        if self._logger is None:
            self._logger = Logger(
                name="processor",
                config=LoggerConfig.quiet(),
            )
        self._output = output
        self._validators = {
            msg_type: RoundTripValidator(
                model_for(msg_type),
                strict=self._config.strict_decoding,
                strict_numeric_types=self._config.strict_numeric_types,
            )
            for msg_type in MessageType
        }
        self.stats = ProcessorStats()

    def process(self, raw: str | bytes) -> ProcessResult:
        """Split, display and validate one wire message.

        Args:
            raw: The message exactly as delivered by the transport.

        Returns:
            ProcessResult: The split message, its type and the outcome.
        """
        message = split_message(raw)
        self.stats.record_received(message.msg_type)

        self._output(f"Received zmq message type: {message.msg_type}")
        self._output(f"{format_json(message.body)}\n")

        msg_type = resolve(message.msg_type)
        if msg_type is None:
            self.stats.record_unknown()
            self._output(f"Received unknown message type: {message.msg_type}")
            self._output(f"Message body: {message.body}")
            return ProcessResult(message=message, msg_type=None, outcome=None)

        outcome = self._validators[msg_type].validate(message.body)
        self.stats.record_outcome(outcome.kind)
        if not outcome.is_ok:
            self._output(f"Validation failed for {message.msg_type}: {outcome.describe()}")
            self._output(f"Raw JSON: {message.body}")
            self._logger.warning(
                f"[{msg_type.value}] {outcome.kind.value}: {outcome.detail}"
            )

        return ProcessResult(message=message, msg_type=msg_type, outcome=outcome)

    def handle(self, raw: str | bytes) -> ProcessResult | None:
        """Process one message, logging instead of raising on unexpected errors.

        Returns:
            ProcessResult | None: The result, or None if processing raised.
        """
        try:
            return self.process(raw)
        except Exception as exc:
            self.stats.record_error()
            self._logger.error(f"Failed to process message: {exc!r}")
            return None
