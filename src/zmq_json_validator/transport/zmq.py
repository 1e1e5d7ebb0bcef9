import zmq


class TransportUnavailableError(RuntimeError):
    """The subscription socket could not be set up."""


class ZmqSubscriber:
    """
    A synchronous ZeroMQ SUB connection to a publisher endpoint.

    The socket connects (never binds) to the endpoint and applies a
    subscription filter; an empty filter subscribes to every topic.

    This version uses the standard synchronous zmq API with blocking calls.
    """

    def __init__(
        self,
        path: str = "tcp://127.0.0.1:18084",
        subscribe_filter: str = "",
        rcv_hwm: int = 100_000,
        rcv_timeout_ms: int = -1,
    ):
        """
        Initialize a ZMQ subscriber with customizable parameters.

        Args:
            path (str, optional): The endpoint to connect to, e.g. "tcp://127.0.0.1:18084".
                Defaults to "tcp://127.0.0.1:18084".
            subscribe_filter (str, optional): Topic prefix to subscribe to.
                Defaults to "" (everything).
            rcv_hwm (int, optional): High-water mark for receives. Defaults to 100,000.
            rcv_timeout_ms (int, optional): Receive timeout in milliseconds; -1 blocks
                forever. Defaults to -1.
        """
        self.path = path
        self.subscribe_filter = subscribe_filter
        self.rcv_hwm = rcv_hwm
        self.rcv_timeout_ms = rcv_timeout_ms

        self._context = None
        self._socket = None
        self._is_started = False

    @property
    def is_started(self) -> bool:
        return self._is_started

    def _ensure_started(self):
        """
        Ensure that the socket has started.
        """
        if not self._is_started:
            raise RuntimeError("Socket has not started; call '.start()' first")

    def start(self):
        """
        Create the socket, connect it and apply the subscription filter.

        Raises:
            TransportUnavailableError: If a ZMQ error occurs, with details about the failure.
        """
        if self._is_started:
            return

        self._context = zmq.Context()
        try:
            self._socket = self._context.socket(zmq.SUB)
            self._socket.setsockopt(zmq.RCVHWM, self.rcv_hwm)
            self._socket.setsockopt(zmq.RCVTIMEO, self.rcv_timeout_ms)
            self._socket.connect(self.path)
            self._socket.setsockopt_string(zmq.SUBSCRIBE, self.subscribe_filter)
            self._is_started = True
        except zmq.error.ZMQError as e:
            if self._socket is not None:
                self._socket.close()
                self._socket = None
            self._context.term()
            self._context = None

            raise TransportUnavailableError(
                f"ZMQ error when connecting to {self.path}: {str(e)}"
            ) from e

    def recv(self) -> bytes:
        """
        Receive one message (blocking).

        Multipart messages are returned as their first frame; the node
        publishes each notification as a single frame.

        Returns:
            bytes: The data received from the socket.

        Raises:
            RuntimeError: If the socket is not started.
            zmq.error.Again: If a receive timeout is set and it expires.
        """
        return self.recv_multipart()[0]

    def recv_multipart(self) -> list[bytes]:
        """
        Receive all frames of one message (blocking).

        Raises:
            RuntimeError: If the socket is not started.
            zmq.error.Again: If a receive timeout is set and it expires.
        """
        self._ensure_started()
        return self._socket.recv_multipart()

    def stop(self):
        """
        Close the socket and terminate the context.
        """
        if self._socket is not None:
            self._socket.close(linger=0)
            self._socket = None
        if self._context is not None:
            self._context.term()
            self._context = None
        self._is_started = False

    def __enter__(self) -> "ZmqSubscriber":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
