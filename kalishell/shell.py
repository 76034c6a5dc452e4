"""The interactive read-eval loop of the shell."""

from __future__ import annotations

import contextlib
import sys
from typing import Callable, TextIO

from kalishell.aliases import AliasTable
from kalishell.builtins import BuiltinStatus, execute_builtin, is_builtin
from kalishell.completion import Completer
from kalishell.config import ShellConfig, default_config_path
from kalishell.executor import ExecutionError, execute
from kalishell.history import History
from kalishell.parser import ParseError, parse_input
from kalishell.prompt import render_prompt
from kalishell.utils import trim_whitespace

HISTORY_FILENAME = ".kali_shell_history"


class Shell:
    """Reads lines, expands aliases, and runs builtins or external commands."""

    def __init__(
        self,
        config: ShellConfig | None = None,
        aliases: AliasTable | None = None,
        history: History | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        self.config = config if config is not None else ShellConfig()
        self.aliases = aliases if aliases is not None else AliasTable()
        self.history = history if history is not None else History()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self._input_func = input_func
        self._readline = None

    def handle_line(self, line: str) -> bool:
        """Process one input line; returns False when the shell should exit."""
        line = trim_whitespace(line)
        if not line:
            return True
        self.history.add(line)
        if self._readline is not None:
            self._readline.add_history(line)

        try:
            commands = parse_input(self.aliases.expand(line))
        except ParseError:
            self.err.write("parse error\n")
            return True

        # Every parsed command is dispatched, later pipeline stages included.
        for command in commands:
            name = command.argv[0] if command.argv else None
            if is_builtin(name):
                if execute_builtin(command, self.out, self.err) is BuiltinStatus.EXIT:
                    return False
                continue
            self.out.flush()
            try:
                execute(command)
            except ExecutionError:
                self.err.write("command execution failed\n")
        return True

    def _setup_readline(self) -> None:
        if not sys.stdin.isatty():
            return
        try:
            import readline
        except ImportError:
            return
        completer = Completer(begidx=readline.get_begidx)
        readline.set_completer(completer.complete)
        readline.parse_and_bind("tab: complete")
        self._readline = readline

    def run(self) -> None:
        """Prompt and process lines until end of input or ``exit``."""
        read = self._input_func
        if read is None:
            read = input
            self._setup_readline()
        try:
            while True:
                prompt = render_prompt(self.config)
                try:
                    line = read(prompt)
                except EOFError:
                    self.out.write("\n")
                    break
                except KeyboardInterrupt:
                    self.out.write("\n")
                    continue
                if not self.handle_line(line):
                    break
        finally:
            self.history.save()


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell with the user's configuration."""
    config = ShellConfig()
    aliases = AliasTable()
    config_path = default_config_path()
    if config_path is not None:
        with contextlib.suppress(OSError):
            config.load(config_path)
        with contextlib.suppress(OSError):
            aliases.load(config_path)
    history = History(HISTORY_FILENAME)
    Shell(config=config, aliases=aliases, history=history).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())