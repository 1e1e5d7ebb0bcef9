import os

from zmq_json_validator.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """
    Appends pushed log lines to a ``.txt`` file.

    The file is opened once, when the handler is built, so a bad path fails
    at startup rather than on the first push. Each push is flushed to the
    OS before returning.
    """

    def __init__(self, filepath: str, create: bool = False) -> None:
        """
        Open ``filepath`` for appending.

        Args:
            filepath (str): Path of the log file. Must end with ".txt".
            create (bool): If True, missing parent directories are created.
                Defaults to False.

        Raises:
            ValueError: If the provided filepath does not end with ".txt".
            OSError: If the file cannot be opened for appending.
        """
        super().__init__()

        if not filepath.endswith(".txt"):
            raise ValueError(
                f"Invalid filepath; expected string ending with '.txt' but got {filepath}"
            )

        directory = os.path.dirname(filepath)
        if create and directory:
            os.makedirs(directory, exist_ok=True)

        self.filepath = filepath
        self._file = open(filepath, "a", encoding="utf-8")

    @property
    def is_closed(self) -> bool:
        return self._file.closed

    def push(self, buffer: list[str]) -> None:
        self._file.write("\n".join(buffer) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()
