"""Helpers for reading values from sysfs and procfs files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Jiffies:
    """CPU time counters: all jiffies and the working (user, nice, system) part."""

    all: int = -1
    working: int = -1


def exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` exists."""
    return os.path.exists(path)


def directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in directory ``path``, or an empty list if it cannot be read."""
    try:
        return [name for name in os.listdir(path) if name not in (".", "..")]
    except OSError:
        return []


def read_first_line(path: str | os.PathLike[str]) -> str | None:
    """Return the first line of the file at ``path`` without its newline, or None."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            line = stream.readline()
    except OSError:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_int(path: str | os.PathLike[str]) -> int:
    """Read the leading integer of the first line at ``path``; -1 if unavailable."""
    line = read_first_line(path)
    if line is None:
        return -1
    match = _LEADING_INT.match(line)
    if match is None:
        return -1
    return int(match.group(1))


def read_jiffies(index: int, stat_path: str | os.PathLike[str] = "/proc/stat") -> Jiffies:
    """Read the jiffies of line ``index`` of a /proc/stat style file.

    Line 0 is the aggregate ``cpu`` line, line ``n`` the ``n-1``-th thread.
    Returns an empty :class:`Jiffies` if the file cannot be opened and raises
    ValueError if the line does not hold ten counters.
    """
    try:
        with open(stat_path, encoding="utf-8") as stream:
            lines = stream.read().split("\n")
    except OSError:
        return Jiffies()
    line = lines[index] if 0 <= index < len(lines) else ""
    fields = line.split()
    if len(fields) < 11:
        raise ValueError(f"malformed stat line {index}: {line!r}")
    try:
        counters = [int(value) for value in fields[1:11]]
    except ValueError as exc:
        raise ValueError(f"malformed stat line {index}: {line!r}") from exc
    return Jiffies(all=sum(counters), working=sum(counters[:3]))