"""Running external commands and pipelines of them."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from typing import IO

from kalishell.parser import Command

EXIT_FAILURE = 1


class ExecutionError(OSError):
    """Raised when the shell cannot set up a pipeline."""


def _close(fd: int | None) -> None:
    if fd is not None:
        os.close(fd)


def _spawn(
    stage: Command, input_fd: int | None, output_fd: int | None
) -> subprocess.Popen[bytes] | None:
    """Start one stage; report problems on stderr and return None on failure."""
    if not stage.argv:
        print("exec failed: missing command name", file=sys.stderr)
        return None

    with contextlib.ExitStack() as stack:
        stdin: int | IO[bytes] | None = input_fd
        stdout: int | IO[bytes] | None = output_fd

        if stage.input_file is not None:
            try:
                stdin = stack.enter_context(open(stage.input_file, "rb"))
            except OSError as exc:
                print(
                    f"cannot open input file '{stage.input_file}': {exc.strerror}",
                    file=sys.stderr,
                )
                return None

        if stage.output_file is not None:
            mode = "ab" if stage.append_output else "wb"
            try:
                stdout = stack.enter_context(open(stage.output_file, mode))
            except OSError as exc:
                print(
                    f"cannot open output file '{stage.output_file}': {exc.strerror}",
                    file=sys.stderr,
                )
                return None

        try:
            return subprocess.Popen(stage.argv, stdin=stdin, stdout=stdout)
        except OSError as exc:
            print(f"exec failed: {stage.argv[0]}: {exc.strerror}", file=sys.stderr)
            return None


def execute(command: Command) -> int:
    """Run *command* and every command it pipes into, waiting for all of them.

    Returns the exit status of the last stage; a stage that could not be
    started counts as having failed with status 1. Raises ExecutionError
    if a pipe between stages cannot be created.
    """
    processes: list[subprocess.Popen[bytes] | None] = []
    input_fd: int | None = None
    try:
        for stage in command.pipeline():
            read_fd: int | None = None
            write_fd: int | None = None
            if stage.pipe_to is not None:
                try:
                    read_fd, write_fd = os.pipe()
                except OSError as exc:
                    print(f"pipe: {exc.strerror}", file=sys.stderr)
                    raise ExecutionError(
                        exc.errno, f"cannot create pipe: {exc.strerror}"
                    ) from exc
            try:
                processes.append(_spawn(stage, input_fd, write_fd))
            finally:
                _close(input_fd)
                _close(write_fd)
                input_fd = read_fd
    finally:
        _close(input_fd)
        for process in processes:
            if process is not None:
                process.wait()

    last = processes[-1] if processes else None
    return EXIT_FAILURE if last is None else last.returncode