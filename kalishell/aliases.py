"""Command aliases read from the configuration file."""

from __future__ import annotations

import os

from kalishell.utils import trim_whitespace

MAX_ALIASES = 64
_PREFIX = "alias "
_QUOTES = ("'", '"')
_C_WHITESPACE = " \t\n\v\f\r"


def parse_alias_line(line: str) -> tuple[str, str] | None:
    """Return (name, command) for an ``alias name=command`` line, else None."""
    line = trim_whitespace(line)
    if not line.startswith(_PREFIX):
        return None
    name, sep, command = line[len(_PREFIX):].partition("=")
    if not sep:
        return None
    name = trim_whitespace(name)
    command = trim_whitespace(command)
    if command and command[0] in _QUOTES and command[-1] == command[0]:
        command = command[1:-1]
    return name, command


class AliasTable:
    """Aliases in the order they were defined; the first definition wins."""

    def __init__(self, limit: int = MAX_ALIASES) -> None:
        self.limit = limit
        self._aliases: list[tuple[str, str]] = []

    def add(self, name: str, command: str) -> bool:
        """Define an alias; returns False if the table is already full."""
        if len(self._aliases) >= self.limit:
            return False
        self._aliases.append((name, command))
        return True

    def load(self, path: str | os.PathLike[str]) -> None:
        """Add every alias line of the file at *path*.

        Raises OSError if the file cannot be read.
        """
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            for line in handle:
                parsed = parse_alias_line(line)
                if parsed is not None:
                    self.add(*parsed)

    def expand(self, line: str) -> str:
        """Replace the first space-delimited word of *line* if it is an alias."""
        if not line:
            return line
        first = line.partition(" ")[0]
        command = next((cmd for name, cmd in self._aliases if name == first), None)
        if command is None:
            return line
        rest = line[len(first):].lstrip(_C_WHITESPACE)
        return f"{command} {rest}" if rest else command

    def __len__(self) -> int:
        return len(self._aliases)