"""Round-trip validation of JSON payloads against typed models."""

from .compare import (
    MAX_NESTING_DEPTH as MAX_NESTING_DEPTH,
)
from .compare import (
    Mismatch as Mismatch,
)
from .compare import (
    StructuralComparator as StructuralComparator,
)
from .compare import (
    find_mismatch as find_mismatch,
)
from .compare import (
    nesting_depth as nesting_depth,
)
from .errors import (
    DeserializeError as DeserializeError,
)
from .errors import (
    MismatchError as MismatchError,
)
from .errors import (
    ParseError as ParseError,
)
from .errors import (
    RoundTripError as RoundTripError,
)
from .outcome import (
    OutcomeKind as OutcomeKind,
)
from .outcome import (
    ValidationOutcome as ValidationOutcome,
)
from .validator import (
    RoundTripValidator as RoundTripValidator,
)
from .validator import (
    validate as validate,
)
