# kalishell

A small interactive shell for POSIX systems. It reads a line, expands an
alias in its first word, and runs a builtin or external programs, with
pipelines and file redirection. Entered lines are kept in a history file, and
the prompt has a light and a dark colour theme.

## Installing

```
pip install .
```

## Running

```
kalishell
```

The same loop can be started with `python -m kalishell.shell`. The prompt
appears and waits for input. To leave, type `exit` or press Ctrl-D. Ctrl-C at
the prompt starts a fresh line.

## Command lines

- Pipelines: `ls -l | grep py`
- Input redirection: `sort < names.txt`
- Output redirection: `echo hi > out.txt` (overwrite), `echo hi >> out.txt`
  (append)
- Builtins: `cd DIR`, `exit`, `help`

Words are split on spaces and tabs only. A redirection operator must stand as
its own word and be followed by a file name; otherwise the line is rejected
with `parse error`. A command keeps at most 63 words, and a line at most 64
`|`-separated commands; empty pieces between `|` are dropped.

Each `|`-separated command is run in turn starting from itself: for
`a | b | c` the shell runs the pipeline `a | b | c`, then `b | c`, then `c`
on its own. If one of them is a builtin, only that builtin runs at that step.
`exit` anywhere in the line ends the shell when its turn comes.

When a program cannot be started, or a redirection file cannot be opened, a
message is printed on standard error and the rest of the line goes on.

`alias`, `unalias`, `history`, `jobs`, `fg` and `bg` are recognised as builtin
names (so they are never looked up on `PATH`) but do nothing. `cd` without an
argument prints `cd: missing argument`.

Tab completion is set up when standard input is a terminal and the `readline`
module is available. The first word completes to builtin names and to
executables found on `PATH`; later words complete to file names.

## Configuration

At start-up the shell reads `~/.kali_shellrc` if `HOME` is set and the file
can be read. Blank lines and lines beginning with `#` are skipped, and
surrounding whitespace is removed from every line and value.

```
# prompt escapes: \u user, \h host, \w working directory,
# \$ prints '#' for root and '$' for everyone else, \\ a backslash
prompt=\u@\h:\w\$
theme=dark
alias ll='ls -l'
alias gs="git status"
```

- `prompt=` sets the prompt format (at most 255 characters). Because the value
  is trimmed, it cannot end in a space. The default is `\u@\h:\w\$ ` with a
  trailing space. Any other backslash escape is shown as written. The rendered
  prompt is cut to 511 characters.
- `theme=` may be `light` (the default) or `dark`; other values are ignored.
- `alias NAME=COMMAND` defines an alias. One pair of matching single or double
  quotes around the command is removed. Up to 64 aliases are kept; when a name
  is defined twice, the first definition is used. Only the first
  space-delimited word of a line is checked against the aliases.

History is read at start-up from `.kali_shell_history` and written back there
when the shell exits; the name is relative, so it is resolved against the
working directory at each of those moments. At most 1000 entries are kept, a
line equal to the one before it is not stored again, and an empty history is
not written.

## Using it as a library

```python
from kalishell.parser import parse_input
from kalishell.config import ShellConfig
from kalishell.prompt import render_prompt
from kalishell.aliases import AliasTable
from kalishell.history import History

commands = parse_input("cat < in.txt | sort >> out.txt")
print(commands[0].argv, commands[0].input_file)           # ['cat'] in.txt
print(commands[1].output_file, commands[1].append_output)  # out.txt True
print([c.argv for c in commands[0].pipeline()])

config = ShellConfig()
config.apply_line("theme=dark")
print(render_prompt(config, user="alice", hostname="box", cwd="/tmp", is_root=False))

aliases = AliasTable()
aliases.add("ll", "ls -l")
print(aliases.expand("ll /tmp"))  # ls -l /tmp

history = History()
history.add("ls")
history.add("ls")
print(list(history))  # ['ls']
```

Other pieces: `kalishell.executor.execute(command)` runs a command and the
ones it pipes into and returns the last exit status;
`kalishell.builtins.is_builtin` and `execute_builtin` handle builtins;
`kalishell.completion.command_matches` and `Completer` provide completion;
`kalishell.shell.Shell` is the read loop, and `Shell.handle_line` processes a
single line.

## What it does not do

- No quoting, escaping, globbing, or variable or `~` expansion in commands.
- No background jobs, job control or `&`; commands always run in the
  foreground and the shell waits for them.
- No `;`, `&&` or `||` command lists.
- Exit statuses are not shown and are not kept for later commands.