import io
import os
import sys

from kalishell.aliases import AliasTable
from kalishell.config import ShellConfig
from kalishell.history import History
from kalishell.shell import Shell, main


def make_shell(**kwargs):
    out = io.StringIO()
    err = io.StringIO()
    shell = Shell(
        config=ShellConfig(prompt_format="> "),
        aliases=kwargs.pop("aliases", AliasTable()),
        history=kwargs.pop("history", History()),
        out=out,
        err=err,
        **kwargs,
    )
    return shell, out, err


def scripted(items):
    prompts = []
    remaining = iter(items)

    def read(prompt):
        prompts.append(prompt)
        try:
            item = next(remaining)
        except StopIteration:
            raise EOFError from None
        if isinstance(item, BaseException):
            raise item
        return item

    return read, prompts


def test_exit_stops():
    shell, _, _ = make_shell()
    assert shell.handle_line("exit") is False


def test_blank_line_is_ignored():
    shell, _, _ = make_shell()
    assert shell.handle_line("   \t ") is True
    assert len(shell.history) == 0


def test_help_prints_and_records_trimmed_line():
    shell, out, _ = make_shell()
    assert shell.handle_line("  help  ") is True
    assert "kali-shell builtin commands:" in out.getvalue()
    assert list(shell.history) == ["help"]


def test_alias_expansion_applies():
    aliases = AliasTable()
    aliases.add("bye", "exit")
    shell, _, _ = make_shell(aliases=aliases)
    assert shell.handle_line("bye") is False
    assert list(shell.history) == ["bye"]


def test_parse_error_reported_but_recorded():
    shell, _, err = make_shell()
    assert shell.handle_line("cat <") is True
    assert err.getvalue() == "parse error\n"
    assert list(shell.history) == ["cat <"]


def test_cd_missing_argument():
    shell, _, err = make_shell()
    shell.handle_line("cd")
    assert err.getvalue() == "cd: missing argument\n"


def test_cd_changes_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    shell, _, err = make_shell()
    assert shell.handle_line(f"cd {tmp_path}") is True
    assert err.getvalue() == ""
    assert list(shell.history) == [f"cd {tmp_path}"]
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_external_command_with_redirection(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell, _, _ = make_shell()
    assert shell.handle_line(f"{sys.executable} -c print(42) > out.txt") is True
    assert (tmp_path / "out.txt").read_text() == "42\n"


def test_run_until_end_of_input_saves_history(tmp_path):
    history_file = tmp_path / "hist"
    read, prompts = scripted(["help", "help"])
    shell, out, _ = make_shell(history=History(history_file), input_func=read)
    shell.run()
    assert prompts == ["> ", "> ", "> "]
    assert history_file.read_text() == "help\n"
    assert out.getvalue().endswith("\n")


def test_run_stops_at_exit():
    read, prompts = scripted(["exit", "help"])
    shell, out, _ = make_shell(input_func=read)
    shell.run()
    assert len(prompts) == 1
    assert "kali-shell" not in out.getvalue()


def test_run_continues_after_interrupt():
    read, prompts = scripted([KeyboardInterrupt(), "exit"])
    shell, _, _ = make_shell(input_func=read)
    shell.run()
    assert len(prompts) == 2
    assert list(shell.history) == ["exit"]