import io
import sys

import pytest

from scratchpad.repl import PROMPT, WELCOME, evaluate, main, read_lines, run


def _exit_with(code):
    return [sys.executable, "-c", f"raise SystemExit({code})"]


def test_read_lines_keeps_newlines_and_partial_tail():
    assert list(read_lines(io.StringIO("a\nb\nc"))) == ["a\n", "b\n", "c"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_round_trip():
    text = "first\n\nthird line\n"
    assert "".join(read_lines(io.StringIO(text))) == text


def test_evaluate_empty_line_runs_nothing():
    assert evaluate("", _exit_with(3)) is None


def test_evaluate_returns_exit_status():
    assert evaluate("edit\n", _exit_with(3)) == 3


def test_evaluate_missing_program():
    with pytest.raises(OSError):
        evaluate("x\n", ["/nonexistent/definitely/not/here"])


def test_run_evaluates_each_line():
    out = io.StringIO()
    statuses = run(io.StringIO("one\ntwo\n"), out, _exit_with(7))
    assert statuses == [7, 7]
    status_line = "Child process exited with status 7\n"
    assert out.getvalue() == (
        WELCOME + "\n" + PROMPT + status_line + PROMPT + status_line + PROMPT + "\n"
    )


def test_run_partial_last_line_ends_loop():
    out = io.StringIO()
    statuses = run(io.StringIO("one\ntail"), out, _exit_with(0))
    assert statuses == [0, 0]
    assert out.getvalue().count(PROMPT) == 2


def test_run_empty_input():
    out = io.StringIO()
    assert run(io.StringIO(""), out, _exit_with(0)) == []
    assert out.getvalue() == WELCOME + "\n" + PROMPT + "\n"


def test_run_continues_after_start_failure(capsys):
    out = io.StringIO()
    statuses = run(io.StringIO("a\nb\n"), out, ["/nonexistent/definitely/not/here"])
    assert statuses == []
    assert "child process creation failed" in capsys.readouterr().err


def test_main_greets_and_runs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("go\n"))
    assert main(_exit_with(4)) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Hello World!"
    assert lines[1] == WELCOME
    assert "Child process exited with status 4" in lines[2]