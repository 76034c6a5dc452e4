import pytest

from kalishell.history import MAX_HISTORY, History


def test_add_and_iterate():
    history = History()
    for line in ["ls", "pwd", "ls"]:
        history.add(line)
    assert list(history) == ["ls", "pwd", "ls"]
    assert len(history) == 3


def test_duplicate_of_last_is_ignored():
    history = History()
    history.add("ls")
    history.add("ls")
    assert list(history) == ["ls"]


def test_empty_line_is_ignored():
    history = History()
    history.add("")
    assert len(history) == 0


def test_oldest_dropped_when_full():
    history = History(limit=3)
    for line in ["a", "b", "c", "d"]:
        history.add(line)
    assert list(history) == ["b", "c", "d"]


def test_default_limit():
    history = History()
    for i in range(MAX_HISTORY + 5):
        history.add(f"cmd{i}")
    assert len(history) == MAX_HISTORY
    assert list(history)[0] == "cmd5"


def test_invalid_limit():
    with pytest.raises(ValueError):
        History(limit=0)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "hist"
    history = History(path)
    for line in ["echo one", "ls -l | wc", "cd /"]:
        history.add(line)
    history.save()
    assert path.read_text(encoding="utf-8") == "echo one\nls -l | wc\ncd /\n"
    assert list(History(path)) == ["echo one", "ls -l | wc", "cd /"]


def test_load_missing_file(tmp_path):
    history = History(tmp_path / "none")
    assert len(history) == 0
    assert not (tmp_path / "none").exists()


def test_load_strips_single_line_end(tmp_path):
    path = tmp_path / "hist"
    path.write_bytes(b"a\r\nb\nc")
    assert list(History(path)) == ["a\r", "b", "c"]


def test_load_keeps_first_entries_up_to_limit(tmp_path):
    path = tmp_path / "hist"
    path.write_text("1\n2\n3\n4\n", encoding="utf-8")
    assert list(History(path, limit=2)) == ["1", "2"]


def test_load_keeps_repeated_lines(tmp_path):
    path = tmp_path / "hist"
    path.write_text("x\nx\n\n", encoding="utf-8")
    assert list(History(path)) == ["x", "x", ""]


def test_save_without_path_or_entries(tmp_path):
    path = tmp_path / "hist"
    History(path).save()
    assert not path.exists()
    unbound = History()
    unbound.add("ls")
    unbound.save()
    assert list(unbound) == ["ls"]


def test_clear():
    history = History()
    history.add("ls")
    history.clear()
    assert list(history) == []