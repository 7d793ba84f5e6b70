"""A minimal command runner for "|" and ";" separated command lines.

Each command is run directly by path (no PATH lookup), commands are
waited for one after another, and a "|" connects a command's output to
the input of everything that follows. The built-in "cd" takes exactly
one argument.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from microsh.output import putstr_fd

PIPE = "|"
SEMICOLON = ";"
FATAL = "error: fatal\n"

STDOUT_FD = 1
STDERR_FD = 2


@dataclass
class Segment:
    """One command and whether its output feeds a pipe."""

    args: list[str] = field(default_factory=list)
    piped: bool = False


def parse_segments(argv: Sequence[str]) -> list[Segment]:
    """Split words into commands at "|" and ";", dropping empty commands."""
    segments: list[Segment] = []
    current: list[str] = []
    for word in argv:
        if word in (PIPE, SEMICOLON):
            if current:
                segments.append(Segment(current, word == PIPE))
            current = []
        else:
            current.append(word)
    if current:
        segments.append(Segment(current, False))
    return segments


def change_directory(args: Sequence[str]) -> int:
    """Run the cd built-in; args includes "cd" itself. Return 0 or 1."""
    if len(args) != 2:
        putstr_fd("error: cd: bad arguments\n", STDERR_FD)
        return 1
    try:
        os.chdir(args[1])
    except OSError:
        putstr_fd(f"error: cd: cannot change directory to {args[1]}\n", STDERR_FD)
        return 1
    return 0


def _isolated_change_directory(args: Sequence[str]) -> int:
    """Run cd for its status only, leaving the current directory untouched."""
    original = os.open(os.curdir, os.O_RDONLY)
    try:
        return change_directory(args)
    finally:
        os.fchdir(original)
        os.close(original)


def _spawn(
    args: Sequence[str],
    env: Mapping[str, str] | None,
    stdin_fd: int | None,
    stdout_fd: int | None,
) -> int:
    program = args[0]
    executable = program if "/" in program else os.path.join(os.curdir, program)
    try:
        process = subprocess.Popen(
            list(args),
            executable=executable,
            stdin=stdin_fd,
            stdout=stdout_fd,
            env=None if env is None else dict(env),
        )
    except OSError:
        putstr_fd(f"error: cannot execute {program}\n", STDERR_FD)
        return 1
    return 1 if process.wait() > 0 else 0


def _execute(
    segment: Segment,
    env: Mapping[str, str] | None,
    stdin_fd: int | None,
) -> tuple[int, int | None]:
    args = segment.args
    if not segment.piped and args[0] == "cd":
        return change_directory(args), stdin_fd

    read_fd: int | None = None
    write_fd: int | None = None
    if segment.piped:
        try:
            read_fd, write_fd = os.pipe()
        except OSError:
            putstr_fd(FATAL, STDERR_FD)
            return 1, stdin_fd

    try:
        if args[0] == "cd":
            status = _isolated_change_directory(args)
        else:
            status = _spawn(args, env, stdin_fd, write_fd)
    finally:
        if write_fd is not None:
            os.close(write_fd)

    if segment.piped:
        if stdin_fd is not None:
            os.close(stdin_fd)
        stdin_fd = read_fd
    return status, stdin_fd


def run_segments(
    segments: Sequence[Segment],
    env: Mapping[str, str] | None = None,
    trace: bool = False,
) -> int:
    """Run commands in order and return the status of the last one.

    The status is 1 when the last command exited with a non-zero code
    and 0 otherwise. With trace set, each command's name is announced
    on standard output before it runs.
    """
    status = 0
    stdin_fd: int | None = None
    try:
        for segment in segments:
            if not segment.args:
                continue
            if trace:
                putstr_fd(f"current command : {segment.args[0]}\n", STDOUT_FD)
            status, stdin_fd = _execute(segment, env, stdin_fd)
    finally:
        if stdin_fd is not None:
            os.close(stdin_fd)
    return status


def run(
    argv: Sequence[str],
    env: Mapping[str, str] | None = None,
    trace: bool = False,
) -> int:
    """Parse words into commands and run them."""
    return run_segments(parse_segments(argv), env, trace)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line given as arguments; return its status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    return run(argv, os.environ)