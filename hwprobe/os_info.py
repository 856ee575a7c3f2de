"""Operating system information."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from hwprobe.sysfs import exists

_UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class OSInfo:
    """Name, version, kernel, word size and byte order of the running system."""

    name: str
    version: str
    kernel: str
    is_32bit: bool
    is_64bit: bool
    is_big_endian: bool
    is_little_endian: bool


def _unquote(line: str) -> str:
    value = line[line.find("=") + 1:]
    # The value is enclosed in quotes; drop the first and the last character.
    return value[1:-1]


def parse_os_release(text: str) -> tuple[str, str]:
    """Return ``(pretty_name, version)`` from os-release content.

    Missing keys give empty strings; a later line overrides an earlier one.
    """
    name = ""
    version = ""
    for line in text.splitlines():
        if line.startswith("PRETTY_NAME"):
            name = _unquote(line)
        if line.startswith("VERSION="):
            version = _unquote(line)
    return name, version


def _kernel_release() -> str:
    try:
        return os.uname().release
    except (AttributeError, OSError):
        return _UNKNOWN


def read_os(root: str = "/") -> OSInfo:
    """Collect operating system information, reading files below ``root``."""
    try:
        with open(os.path.join(root, "etc", "os-release"), encoding="utf-8", errors="replace") as stream:
            name, version = parse_os_release(stream.read())
    except OSError:
        name, version = "Linux", _UNKNOWN
    is_64bit = exists(os.path.join(root, "lib64", "ld-linux-x86-64.so.2"))
    little = sys.byteorder == "little"
    return OSInfo(
        name=name,
        version=version,
        kernel=_kernel_release(),
        is_32bit=not is_64bit,
        is_64bit=is_64bit,
        is_big_endian=not little,
        is_little_endian=little,
    )