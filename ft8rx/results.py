"""Keeping, printing and saving the decoded message lines."""

from __future__ import annotations

import os
import sys
from collections import deque
from typing import IO, NamedTuple, Optional

DEFAULT_CAPACITY = 50


class ResultRow(NamedTuple):
    """One decoded message as shown to the user."""

    time: str
    value: int
    frequency: int
    message: str
    strength: int

    def as_line(self) -> str:
        """The row as a semicolon-separated line."""
        return ";".join((self.time, str(self.value), str(self.frequency),
                         self.message, str(self.strength)))


class ResultLog:
    """All rows seen, the most recent lines, and an optional save file."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.rows: list[ResultRow] = []
        self.results: deque[str] = deque(maxlen=capacity)
        self._file: Optional[IO[str]] = None

    def __enter__(self) -> "ResultLog":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def saving(self) -> bool:
        """Whether lines are currently written to a file."""
        return self._file is not None

    def print_line(self, time: str, value: int, freq: int, message: str,
                   strength: int, vfo: int = 0) -> str:
        """Record a decode; freq is relative to the VFO. Returns the line."""
        row = ResultRow(time, int(value), int(freq) + int(vfo), message, int(strength))
        self.rows.append(row)
        line = row.as_line()
        self.results.append(line)
        if self._file is not None:
            self._file.write(line + "\n")
            self._file.flush()
        print(line, file=sys.stderr)
        return line

    def open_file(self, path: str | os.PathLike[str]) -> None:
        """Start writing lines to path, closing any file already open."""
        self.close()
        self._file = open(path, "w", encoding="utf-8")

    def close(self) -> None:
        """Stop writing to the save file."""
        if self._file is not None:
            self._file.close()
            self._file = None