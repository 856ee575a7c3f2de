"""GPU information read from /sys/class/drm."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hwprobe.pcimapper import PCIMapper
from hwprobe.sysfs import exists, read_first_line

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GPU:
    """A graphics card."""

    vendor: str = ""
    name: str = ""
    driver_version: str = ""
    memory_bytes: int = 0
    frequency_mhz: int = 0
    num_cores: int = 0
    id: int = 0
    vendor_id: str = ""
    device_id: str = ""


def read_drm(path: str) -> str:
    """First line of the drm file at ``path``, or "" if it cannot be read."""
    value = read_first_line(path)
    return "" if value is None else value


def frequencies(drm_path: str) -> list[int]:
    """Return the ``[min, current, max]`` GT frequencies in MHz of a drm card.

    A value that cannot be read leaves its slot at 0 and marks the first
    slot with -1.
    """
    result = [0, 0, 0]
    names = ("gt_min_freq_mhz", "gt_cur_freq_mhz", "gt_max_freq_mhz")
    for slot, name in enumerate(names):
        match = _LEADING_INT.match(read_drm(os.path.join(drm_path, name)))
        if match is None:
            result[0] = -1
        else:
            result[slot] = int(match.group(1))
    return result


def get_all_gpus(root: str = "/", mapper: PCIMapper | None = None) -> list[GPU]:
    """Return the cards found under /sys/class/drm below ``root``.

    Cards 0 to 2 are always probed; after that probing stops at the first
    missing card.
    """
    if mapper is None:
        mapper = PCIMapper()
    gpus = []
    card_id = 0
    while True:
        path = os.path.join(root, "sys", "class", "drm", f"card{card_id}")
        if not exists(path):
            if card_id > 2:
                break
            card_id += 1
            continue
        vendor_id = read_drm(os.path.join(path, "device", "vendor"))
        device_id = read_drm(os.path.join(path, "device", "device"))
        if vendor_id and device_id:
            vendor = mapper[vendor_id]
            gpus.append(
                GPU(
                    vendor=vendor.vendor_name,
                    name=vendor[device_id].device_name,
                    frequency_mhz=frequencies(path)[2],
                    id=card_id,
                    vendor_id=vendor_id,
                    device_id=device_id,
                )
            )
        card_id += 1
    return gpus