"""Parsing of command lines into pipelines of simple commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from kalishell.utils import trim_whitespace

MAX_ARGS = 64
MAX_COMMANDS = 64

_SEPARATORS = re.compile(r"[ \t]+")


class ParseError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass
class Command:
    """One simple command, possibly piped into the next."""

    argv: list[str] = field(default_factory=list)
    raw: str = ""
    input_file: str | None = None
    output_file: str | None = None
    append_output: bool = False
    pipe_to: Command | None = field(default=None, repr=False, compare=False)

    @property
    def argc(self) -> int:
        return len(self.argv)

    @property
    def pipe_count(self) -> int:
        return 1 if self.pipe_to is not None else 0

    def pipeline(self) -> Iterator[Command]:
        """Yield this command and every command it pipes into, in order."""
        command: Command | None = self
        while command is not None:
            yield command
            command = command.pipe_to


def _tokens(text: str) -> list[str]:
    return [token for token in _SEPARATORS.split(text) if token]


def parse_simple_command(text: str) -> Command:
    """Parse a command without pipes, handling <, > and >> redirections."""
    command = Command(raw=text)
    tokens = iter(_tokens(text))
    for token in tokens:
        if len(command.argv) >= MAX_ARGS - 1:
            break
        if token in ("<", ">", ">>"):
            target = next(tokens, None)
            if target is None:
                raise ParseError(f"missing file name after '{token}'")
            if token == "<":
                command.input_file = target
            else:
                command.output_file = target
                command.append_output = token == ">>"
        else:
            command.argv.append(token)
    return command


def parse_input(text: str) -> list[Command]:
    """Parse a full line into its commands, linked through ``pipe_to``."""
    pieces = [piece for piece in text.split("|") if piece][:MAX_COMMANDS]
    commands = [parse_simple_command(trim_whitespace(piece)) for piece in pieces]
    for current, following in zip(commands, commands[1:]):
        current.pipe_to = following
    return commands