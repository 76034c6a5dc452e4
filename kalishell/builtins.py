"""Commands handled by the shell itself."""

from __future__ import annotations

import enum
import os
import sys
from typing import TextIO

from kalishell.parser import Command

BUILTINS = ("cd", "exit", "alias", "unalias", "history", "jobs", "fg", "bg", "help")

_HELP_TEXT = (
    "kali-shell builtin commands:\n"
    "  cd [dir]       Change current directory\n"
    "  exit           Exit shell\n"
    "  help           Show this help\n"
)


class BuiltinStatus(enum.Enum):
    """Outcome of a builtin: keep going or leave the shell."""

    OK = 0
    EXIT = -1


def is_builtin(name: str | None) -> bool:
    """Return True if *name* is a shell builtin."""
    return bool(name) and name in BUILTINS


def execute_builtin(
    command: Command | None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> BuiltinStatus:
    """Run a builtin command, writing messages to *out* and *err*."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    if command is None or not command.argv:
        return BuiltinStatus.OK

    name = command.argv[0]
    if name == "exit":
        return BuiltinStatus.EXIT
    if name == "cd":
        if command.argc < 2:
            err.write("cd: missing argument\n")
            return BuiltinStatus.OK
        try:
            os.chdir(command.argv[1])
        except OSError as exc:
            err.write(f"cd: {exc.strerror}\n")
        return BuiltinStatus.OK
    if name == "help":
        out.write(_HELP_TEXT)
    return BuiltinStatus.OK