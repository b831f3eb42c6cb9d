"""Line-oriented loggers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class Logger(ABC):
    """Something that accepts whole lines of text."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Record one line."""


class FileLogger(Logger):
    """Writes lines to a file, truncating it and creating its directory first."""

    def __init__(self, filename: Union[str, Path]) -> None:
        self.filename = str(filename)
        path = Path(self.filename)
        if str(path.parent) not in ("", "."):
            path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(path, "w", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, message: str) -> None:
        self._file.write(message + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()