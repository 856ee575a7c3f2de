"""Main board information read from the DMI tables in sysfs."""

from __future__ import annotations

import os
from dataclasses import dataclass

from hwprobe.sysfs import read_first_line

_UNKNOWN = "<unknown>"
_DMI_DIRECTORIES = (
    ("sys", "devices", "virtual", "dmi", "id"),
    ("sys", "class", "dmi", "id"),
)


@dataclass(frozen=True)
class MainBoard:
    """The main board's identification."""

    vendor: str
    name: str
    version: str
    serial_number: str


def dmi_value(name: str, root: str = "/") -> str:
    """First non-empty DMI value ``name`` from the known locations, or "<unknown>"."""
    for parts in _DMI_DIRECTORIES:
        value = read_first_line(os.path.join(root, *parts, name))
        if value:
            return value
    return _UNKNOWN


def read_mainboard(root: str = "/") -> MainBoard:
    """Read the main board's vendor, name, version and serial number."""
    return MainBoard(
        vendor=dmi_value("board_vendor", root),
        name=dmi_value("board_name", root),
        version=dmi_value("board_version", root),
        serial_number=dmi_value("board_serial", root),
    )