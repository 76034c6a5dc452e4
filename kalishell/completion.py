"""Tab completion of command names and file names."""

from __future__ import annotations

import os
from typing import Callable

BUILTIN_COMMANDS = ("cd", "exit", "history", "alias", "unalias", "jobs", "fg", "bg")


def path_executables(prefix: str, search_path: str | None = None) -> list[str]:
    """Return names of executables starting with *prefix* in the search path.

    *search_path* defaults to the PATH environment variable.
    """
    if search_path is None:
        search_path = os.environ.get("PATH")
    if search_path is None:
        return []
    found: list[str] = []
    for directory in (part for part in search_path.split(os.pathsep) if part):
        try:
            with os.scandir(directory) as scanner:
                entries = list(scanner)
        except OSError:
            continue
        for entry in entries:
            if not (entry.is_symlink() or entry.is_file(follow_symlinks=False)):
                continue
            if entry.name.startswith(prefix) and os.access(entry.path, os.X_OK):
                found.append(entry.name)
    return found


def command_matches(text: str, search_path: str | None = None) -> list[str]:
    """Return builtins, then executables, whose names start with *text*."""
    builtins = [name for name in BUILTIN_COMMANDS if name.startswith(text)]
    return builtins + path_executables(text, search_path)


def _filename_matches(text: str) -> list[str]:
    directory, partial = os.path.split(text)
    try:
        names = os.listdir(os.path.expanduser(directory) or ".")
    except OSError:
        return []
    return sorted(
        os.path.join(directory, name) if directory else name
        for name in names
        if name.startswith(partial)
    )


class Completer:
    """Readline-style completer: commands for the first word, files after it."""

    def __init__(
        self,
        search_path: str | None = None,
        begidx: Callable[[], int] | None = None,
    ) -> None:
        self.search_path = search_path
        self._begidx = begidx if begidx is not None else (lambda: 0)
        self._matches: list[str] = []

    def complete(self, text: str, state: int) -> str | None:
        """Return the match number *state* for *text*, or None when exhausted."""
        if state == 0:
            if self._begidx() == 0:
                self._matches = command_matches(text, self.search_path)
            else:
                self._matches = _filename_matches(text)
        return self._matches[state] if state < len(self._matches) else None