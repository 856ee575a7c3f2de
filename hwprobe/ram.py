"""Main memory information read from /proc/meminfo."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from hwprobe.stringutils import split, strip

_UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class MemInfo:
    """Total, free and available memory in bytes; -1 where unknown."""

    total: int = -1
    free: int = -1
    available: int = -1


@dataclass(frozen=True)
class MemoryModule:
    """One memory module."""

    id: int
    vendor: str
    name: str
    model: str
    serial_number: str
    total_bytes: int
    frequency_hz: int


def _sysconf(name: str) -> int:
    try:
        return int(os.sysconf(name))
    except (AttributeError, ValueError, OSError):
        return -1


def _from_sysconf(info: MemInfo) -> MemInfo:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGE_SIZE")
    if pages > 0 and page_size > 0:
        info = replace(info, total=pages * page_size)
    if available_pages > 0 and page_size > 0:
        info = replace(info, available=available_pages * page_size)
    return info


def _kib_value(line: str) -> int | None:
    parts = split(line, ":")
    if len(parts) != 2:
        return None
    value = strip(parts[1])
    space = value.find(" ")
    if space == -1:
        return None
    return int(value[:space]) * 1024


def parse_meminfo(text: str) -> MemInfo:
    """Parse MemTotal, MemFree and MemAvailable from /proc/meminfo content.

    Raises ValueError if one of these lines holds a malformed number.
    """
    values = {"MemTotal": -1, "MemFree": -1, "MemAvailable": -1}
    for line in text.split("\n"):
        if all(value != -1 for value in values.values()):
            break
        for key in values:
            if line.startswith(key):
                parsed = _kib_value(line)
                if parsed is not None:
                    values[key] = parsed
                break
    return MemInfo(total=values["MemTotal"], free=values["MemFree"], available=values["MemAvailable"])


def read_meminfo(root: str = "/") -> MemInfo:
    """Read memory figures, falling back to sysconf for missing totals."""
    try:
        with open(os.path.join(root, "proc", "meminfo"), encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return _from_sysconf(MemInfo())
    info = parse_meminfo(text)
    if info.total == -1 or info.available == -1:
        info = _from_sysconf(info)
    return info


@dataclass
class Memory:
    """The system's main memory, seen as a single module."""

    root: str = "/"
    modules: list[MemoryModule] = field(init=False)

    def __init__(self, root: str = "/") -> None:
        self.root = root
        self.modules = [
            MemoryModule(
                id=0,
                vendor=_UNKNOWN,
                name=_UNKNOWN,
                model=_UNKNOWN,
                serial_number=_UNKNOWN,
                total_bytes=read_meminfo(root).total,
                frequency_hz=-1,
            )
        ]

    def total_bytes(self) -> int:
        """Sum of the sizes of all modules."""
        return sum(module.total_bytes for module in self.modules)

    def free_bytes(self) -> int:
        """Currently free memory in bytes, -1 if unknown."""
        return read_meminfo(self.root).free

    def available_bytes(self) -> int:
        """Currently available memory in bytes, -1 if unknown."""
        return read_meminfo(self.root).available