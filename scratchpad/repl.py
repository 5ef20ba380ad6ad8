"""A line-reading loop that starts an external command for every line it reads."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import IO, Iterator, Sequence

DEFAULT_COMMAND = ("/usr/bin/nvim", "repl.c")
PROMPT = ">> "
WELCOME = "Welcome to this custom REPL"


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines with their newline; a final unterminated line is yielded as is."""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


def evaluate(line: str, command: Sequence[str] = DEFAULT_COMMAND) -> int | None:
    """Run ``command`` for a non-empty line and return its exit status.

    An empty line runs nothing and gives None. Raises OSError if the command
    cannot be started.
    """
    if not line:
        return None
    return subprocess.run(list(command), check=False).returncode


def run(
    stream: IO[str],
    output: IO[str] | None = None,
    command: Sequence[str] = DEFAULT_COMMAND,
) -> list[int]:
    """Prompt for lines from ``stream`` until it ends; return the exit statuses seen."""
    output = output if output is not None else sys.stdout
    output.write(WELCOME + "\n")
    statuses: list[int] = []
    lines = read_lines(stream)
    while True:
        output.write(PROMPT)
        output.flush()
        line = next(lines, "")
        if line:
            try:
                status = evaluate(line, command)
            except OSError as exc:
                sys.stderr.write(f"child process creation failed: {exc}\n")
            else:
                if status is not None:
                    statuses.append(status)
                    output.write(f"Child process exited with status {status}\n")
        if not line.endswith("\n"):
            break
    output.write("\n")
    return statuses


def main(argv: Sequence[str] | None = None) -> int:
    """Greet, then run the command once for every line read from standard input."""
    parser = argparse.ArgumentParser(description="Run a command for every input line.")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="command to run")
    args = parser.parse_args(argv)
    command = args.command or list(DEFAULT_COMMAND)
    print("".join(("Hello ", "World!")))
    run(sys.stdin, sys.stdout, command)
    return 0