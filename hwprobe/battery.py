"""Battery information read from /sys/class/power_supply."""

from __future__ import annotations

import math
import os
import re

from hwprobe.sysfs import exists, read_first_line

_UNKNOWN = "<unknown>"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _power_supply_dir(root: str) -> str:
    return os.path.join(root, "sys", "class", "power_supply")


class Battery:
    """A battery identified by its index (BAT<n>).

    Descriptive values are read on first access and kept once non-empty.
    """

    def __init__(self, battery_id: int = 0, root: str = "/") -> None:
        self.id = battery_id
        self.root = root
        self._vendor = ""
        self._model = ""
        self._serial_number = ""
        self._technology = ""
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(id={self.id!r})"

    def _read(self, name: str) -> str | None:
        if self.id < 0:
            return None
        return read_first_line(os.path.join(_power_supply_dir(self.root), f"BAT{self.id}", name))

    def _read_text(self, name: str) -> str:
        value = self._read(name)
        return _UNKNOWN if value is None else value

    def _read_number(self, name: str) -> int:
        value = self._read(name)
        if value is None:
            return 0
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    @property
    def vendor(self) -> str:
        if not self._vendor:
            self._vendor = self._read_text("manufacturer")
        return self._vendor

    @property
    def model(self) -> str:
        if not self._model:
            self._model = self._read_text("model_name")
        return self._model

    @property
    def serial_number(self) -> str:
        if not self._serial_number:
            self._serial_number = self._read_text("serial_number")
        return self._serial_number

    @property
    def technology(self) -> str:
        if not self._technology:
            self._technology = self._read_text("technology")
        return self._technology

    @property
    def energy_full(self) -> int:
        if self._energy_full == 0:
            self._energy_full = self._read_number("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        """Current energy as reported by the kernel, 0 if unavailable."""
        return self._read_number("energy_now")

    def capacity(self) -> float:
        """Ratio of current to full energy; nan or inf when full energy is 0."""
        now = self.energy_now()
        full = self.energy_full
        if full == 0:
            return math.nan if now == 0 else math.copysign(math.inf, now)
        return now / full

    def charging(self) -> bool:
        """True if the battery reports the status "Charging"."""
        return self._read("status") == "Charging"

    def discharging(self) -> bool:
        return not self.charging()


def get_all_batteries(root: str = "/") -> list[Battery]:
    """Return the batteries BAT0, BAT1, ... up to the first missing index."""
    batteries = []
    battery_id = 0
    while exists(os.path.join(_power_supply_dir(root), f"BAT{battery_id}")):
        batteries.append(Battery(battery_id, root))
        battery_id += 1
    return batteries