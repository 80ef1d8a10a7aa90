"""Running external commands given as a single command line."""

from __future__ import annotations

import os
import subprocess
import sys

_QUOTES = ("'", '"')


class CommandError(Exception):
    """An external command exited with a non-zero status."""


def get_exec_dir() -> str:
    """Return the directory that holds the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not program:
        return os.getcwd()
    return os.path.dirname(os.path.abspath(program))


def split_command(cmd: str) -> list[str]:
    """Split on spaces; single or double quotes group text into one argument."""
    parts: list[str] = []
    current: list[str] = []
    delim: str | None = None

    def flush() -> None:
        if current:
            parts.append("".join(current))
            current.clear()

    for char in cmd:
        if char in _QUOTES:
            if delim is None:
                delim = char
                continue
            if delim == char:
                delim = None
                flush()
                continue
        if delim is None and char == " ":
            flush()
            continue
        current.append(char)
    flush()
    return parts


def call(cmd: str) -> None:
    """Run ``cmd`` and wait for it; raise CommandError on a non-zero exit."""
    args = split_command(cmd)
    if not args:
        raise ValueError("empty command")

    extra = {}
    if os.name == "nt":
        extra["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)

    result = subprocess.run(args, capture_output=True, check=False, **extra)
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise CommandError("error > " + args[0] + "\n" + stderr)