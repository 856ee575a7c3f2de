"""Disk information read from /sys/class/block."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hwprobe.stringutils import strip
from hwprobe.sysfs import directory_entries, exists, read_first_line

# The kernel always counts sizes in 512 byte sectors, whatever the real block size.
BLOCK_SIZE = 512

_UNKNOWN = "<unknown>"
_PARTITION = re.compile(r"(sd[a-z]|nvme\d+n\d+)p?\d+$")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Disk:
    """A whole disk (not a partition)."""

    vendor: str = ""
    model: str = ""
    serial_number: str = ""
    size_bytes: int = -1
    id: int = -1


def is_partition(path: str) -> bool:
    """True if ``path`` names a partition of an sd or nvme disk."""
    return _PARTITION.search(path) is not None


def _read_stripped(path: str) -> str:
    value = read_first_line(path)
    return _UNKNOWN if value is None else strip(value)


def disk_vendor(path: str) -> str:
    """Vendor of the block device at ``path``.

    For nvme devices the vendor lives under the nvme class directory, next
    to the block class directory, so the path is rewritten accordingly.
    """
    vendor_path = path
    nvme_pos = path.rfind("nvme")
    if nvme_pos != -1:
        nvme_name = path[nvme_pos:nvme_pos + 5]
        prefix = path[:nvme_pos - 6] if nvme_pos >= 6 else path
        vendor_path = prefix + "nvme/" + nvme_name
    return _read_stripped(os.path.join(vendor_path, "device", "vendor"))


def disk_model(path: str) -> str:
    """Model of the block device at ``path``."""
    return _read_stripped(os.path.join(path, "device", "model"))


def disk_serial_number(path: str) -> str:
    """Serial number of the block device at ``path``."""
    return _read_stripped(os.path.join(path, "device", "serial"))


def disk_size_bytes(path: str) -> int:
    """Size of the block device at ``path`` in bytes, -1 if unavailable."""
    try:
        with open(os.path.join(path, "size"), encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return -1
    match = _LEADING_INT.match(text)
    sectors = int(match.group(1)) if match else 0
    return sectors * BLOCK_SIZE


def get_all_disks(root: str = "/") -> list[Disk]:
    """Return every whole disk found under /sys/class/block below ``root``."""
    base_path = os.path.join(root, "sys", "class", "block")
    disks = []
    for entry in sorted(directory_entries(base_path)):
        path = os.path.join(base_path, entry)
        if not exists(path) or is_partition(path):
            continue
        disk = Disk(
            vendor=disk_vendor(path),
            model=disk_model(path),
            serial_number=disk_serial_number(path),
        )
        # The size file exists for every block device, so judge by the rest.
        if disk.vendor == disk.model == disk.serial_number == _UNKNOWN:
            continue
        disk.size_bytes = disk_size_bytes(path)
        disks.append(disk)
    return disks