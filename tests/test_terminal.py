import io

import pytest

from ylibc.terminal import (
    ConsoleAction,
    console_command,
    main,
    run_console,
    split_command,
)


def _run(lines):
    out = []
    status = run_console(lines, out.append)
    return status, out


def test_halt_command():
    assert console_command("halt\n") == (ConsoleAction.HALT, "halt")


def test_halt_with_leading_space():
    assert console_command("   halt  extra\n") == (ConsoleAction.HALT, "halt")


def test_unrecognized_word_is_first_word():
    assert console_command("  foo bar\n") == (ConsoleAction.UNRECOGNIZED, "foo")


def test_longer_word_is_not_halt():
    assert console_command("halting\n") == (ConsoleAction.UNRECOGNIZED, "halting")


@pytest.mark.parametrize("line", ["", "\n", "   \t\n"])
def test_blank_lines_are_ignored(line):
    assert console_command(line) == (ConsoleAction.IGNORE, "")


def test_overlong_line_is_ignored():
    assert console_command("halt" + " " * 1020) == (ConsoleAction.IGNORE, "")


def test_line_just_under_limit_is_read():
    line = "halt" + " " * 1019
    assert console_command(line) == (ConsoleAction.HALT, "halt")


def test_nul_ends_line():
    assert console_command(b"halt\0junk") == (ConsoleAction.HALT, "halt")


def test_split_command_on_separators():
    assert split_command("ls -l\tfoo\n") == ["ls", "-l", "foo"]


def test_split_command_collapses_runs():
    assert split_command("  a   b\t\tc  ") == ["a", "b", "c"]


def test_split_command_empty_and_too_long():
    assert split_command("") == []
    assert split_command("x" * 1024) == []


def test_split_command_join_round_trip():
    words = ["exec", "prog", "arg1", "arg2"]
    assert split_command(" ".join(words) + "\n") == words


def test_run_console_halts():
    status, out = _run(["hello\n", "halt\n", "never\n"])
    assert status == 0
    assert out == [
        "YALNIX READY\n",
        "Type `halt' to halt Yalnix.\n",
        ">>> ",
        "`hello': Command not recognized.\n",
        ">>> ",
        "Halting....\n",
    ]


def test_run_console_end_of_input():
    status, out = _run(["\n", "   \n"])
    assert status is None
    assert out.count(">>> ") == 2
    assert "Halting....\n" not in out


def test_main_requires_terminal_id(capsys):
    assert main([]) == -1
    assert capsys.readouterr().err == "CONSOLE requires a terminal id.\n"


def test_main_runs_console(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("what\nhalt\n"))
    assert main(["0"]) == 0
    output = capsys.readouterr().out
    assert output.startswith("YALNIX READY\n")
    assert "`what': Command not recognized.\n" in output
    assert output.endswith("Halting....\n")