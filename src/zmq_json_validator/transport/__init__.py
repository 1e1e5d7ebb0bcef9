"""Message feed transport."""

from .zmq import (
    TransportUnavailableError as TransportUnavailableError,
)
from .zmq import (
    ZmqSubscriber as ZmqSubscriber,
)
