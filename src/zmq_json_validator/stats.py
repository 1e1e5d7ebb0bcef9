"""Per-run message counters, printed as a summary at shutdown."""

from dataclasses import dataclass, field

from .validation import OutcomeKind


@dataclass
class ProcessorStats:
    """Track message counts for one run.

    Attributes:
        received: Messages received, of any type.
        validated: Messages that passed the round trip.
        failed: Messages that failed the round trip.
        unknown: Messages with an unrecognized type label.
        errors: Messages whose processing raised unexpectedly.
        by_label: Received messages keyed by raw type label.
        failures_by_kind: Failed messages keyed by failure kind.
    """

    received: int = 0
    validated: int = 0
    failed: int = 0
    unknown: int = 0
    errors: int = 0
    by_label: dict[str, int] = field(default_factory=dict)
    failures_by_kind: dict[OutcomeKind, int] = field(default_factory=dict)

    def record_received(self, label: str) -> None:
        self.received += 1
        self.by_label[label] = self.by_label.get(label, 0) + 1

    def record_outcome(self, kind: OutcomeKind) -> None:
        """Record the outcome of one validated message.

        Args:
            kind: Outcome kind returned by the validator.
        """
        if kind == OutcomeKind.OK:
            self.validated += 1
            return
        self.failed += 1
        self.failures_by_kind[kind] = self.failures_by_kind.get(kind, 0) + 1

    def record_unknown(self) -> None:
        self.unknown += 1

    def record_error(self) -> None:
        self.errors += 1

    def summary(self) -> str:
        """Render the counters as a multi-line report."""
        lines = [
            "Message summary",
            f"  received:  {self.received}",
            f"  validated: {self.validated}",
            f"  failed:    {self.failed}",
            f"  unknown:   {self.unknown}",
            f"  errors:    {self.errors}",
        ]
        for label, count in sorted(self.by_label.items()):
            lines.append(f"  [{label}] {count}")
        for kind, count in sorted(self.failures_by_kind.items()):
            lines.append(f"  {kind.value}: {count}")
        return "\n".join(lines)
