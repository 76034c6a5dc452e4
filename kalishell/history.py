"""Command history kept in memory and persisted to a file."""

from __future__ import annotations

import contextlib
import os
from collections import deque
from itertools import islice
from pathlib import Path
from typing import Iterator

MAX_HISTORY = 1000


class History:
    """A bounded list of previously entered command lines."""

    def __init__(
        self, path: str | os.PathLike[str] | None = None, limit: int = MAX_HISTORY
    ) -> None:
        if limit < 1:
            raise ValueError("history limit must be positive")
        self.limit = limit
        self.path: Path | None = None
        self._entries: deque[str] = deque(maxlen=limit)
        if path is not None:
            self.load(path)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Remember *path* and read its lines; a missing file is not an error."""
        self.path = Path(path)
        try:
            handle = open(self.path, "rb")
        except OSError:
            return
        with handle:
            room = self.limit - len(self._entries)
            for raw in islice(handle, max(room, 0)):
                line = raw.decode("utf-8", errors="surrogateescape")
                if line.endswith(("\n", "\r")):
                    line = line[:-1]
                self._entries.append(line)

    def add(self, line: str) -> None:
        """Append *line*, skipping empty lines and repeats of the last entry."""
        if not line:
            return
        if self._entries and self._entries[-1] == line:
            return
        self._entries.append(line)

    def save(self) -> None:
        """Write the history to its file; nothing happens without a path or entries."""
        if not self._entries or self.path is None:
            return
        with contextlib.suppress(OSError), open(self.path, "wb") as handle:
            for line in self._entries:
                handle.write(line.encode("utf-8", errors="surrogateescape") + b"\n")

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)