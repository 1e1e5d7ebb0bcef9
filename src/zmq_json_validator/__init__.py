"""Round-trip validation of a node's ZMQ JSON notifications."""

from .config import (
    ValidatorConfig as ValidatorConfig,
)
from .dispatch import (
    MESSAGE_MODELS as MESSAGE_MODELS,
)
from .dispatch import (
    DecodedMessage as DecodedMessage,
)
from .dispatch import (
    MessageType as MessageType,
)
from .dispatch import (
    model_for as model_for,
)
from .dispatch import (
    resolve as resolve,
)
from .dispatch import (
    split_message as split_message,
)
from .formatting import (
    format_json as format_json,
)
from .processor import (
    MessageProcessor as MessageProcessor,
)
from .processor import (
    ProcessResult as ProcessResult,
)
from .validation import (
    OutcomeKind as OutcomeKind,
)
from .validation import (
    RoundTripValidator as RoundTripValidator,
)
from .validation import (
    ValidationOutcome as ValidationOutcome,
)
from .validation import (
    validate as validate,
)
