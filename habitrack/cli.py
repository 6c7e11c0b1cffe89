"""Command line entry point: check all habits or log one."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO

from .store import FileStore, check, data_dir, record

_PROG = "habit"


def _usage(err: TextIO) -> None:
    err.write(f"Usage of {_PROG}:\n")


def _parse_flags(args: list[str], err: TextIO) -> list[str]:
    """Strip leading flags; none are defined, so any flag is reported."""
    if not args:
        return []
    arg = args[0]
    if len(arg) < 2 or not arg.startswith("-"):
        return list(args)
    remaining = list(args[1:])
    if arg == "--":
        return remaining
    name = arg[2:] if arg.startswith("--") else arg[1:]
    if not name or name[0] in "-=":
        err.write(f"bad flag syntax: {arg}\n")
    else:
        name = name.split("=", 1)[0]
        if name not in ("h", "help"):
            err.write(f"flag provided but not defined: -{name}\n")
    _usage(err)
    return remaining


def run(
    argv: list[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
    now: datetime | None = None,
) -> int:
    """Run the command and return its exit status."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    args = _parse_flags(list(argv) if argv is not None else sys.argv[1:], err)

    try:
        store = FileStore(data_dir() + "/.habits.json")
    except (OSError, ValueError) as exc:
        err.write(str(exc))
        return 1

    if not args:
        out.write(check(store, now))
        return 0

    try:
        message = record(store, args[0], now)
    except (OSError, ValueError) as exc:
        err.write(str(exc))
        return 1
    out.write(message)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command with the process's streams."""
    return run(argv, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())