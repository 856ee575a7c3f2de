"""CPU information read from procfs and sysfs."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field

from hwprobe.stringutils import split, split_char, strip
from hwprobe.sysfs import Jiffies, read_int, read_jiffies

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``; raise ValueError if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _cpufreq_path(core_id: int, root: str, name: str) -> str:
    return os.path.join(root, "sys", "devices", "system", "cpu", f"cpu{core_id}", "cpufreq", name)


def _frequency_mhz(core_id: int, root: str, name: str) -> int:
    value = read_int(_cpufreq_path(core_id, root, name))
    if value > -1:
        return value // 1000
    return -1


def max_clock_speed_mhz(core_id: int, root: str = "/") -> int:
    """Maximum scaling frequency of ``core_id`` in MHz, or -1 if unknown."""
    return _frequency_mhz(core_id, root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, root: str = "/") -> int:
    """Base frequency of ``core_id`` in MHz, or -1 if unknown."""
    return _frequency_mhz(core_id, root, "base_frequency")


def min_clock_speed_mhz(core_id: int, root: str = "/") -> int:
    """Minimum scaling frequency of ``core_id`` in MHz, or -1 if unknown."""
    return _frequency_mhz(core_id, root, "scaling_min_freq")


def _usage_ratio(current: Jiffies, last: Jiffies, limit: float) -> float:
    total = current.all - last.all
    work = current.working - last.working
    if total == 0:
        return -1.0
    ratio = work / total
    if ratio < 0 or ratio > limit:
        return -1.0
    return ratio


@dataclass
class CPU:
    """One physical CPU socket."""

    id: int = -1
    model_name: str = ""
    vendor: str = ""
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    flags: list[str] = field(default_factory=list)
    root: str = field(default="/", repr=False, compare=False)
    warmup_seconds: float = field(default=1.0, repr=False, compare=False)
    _jiffies_ready: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: dict[int, Jiffies] = field(default_factory=dict, init=False, repr=False, compare=False)

    @property
    def _stat_path(self) -> str:
        return os.path.join(self.root, "proc", "stat")

    def _init_jiffies(self) -> None:
        # Usage needs a delta, so the very first measurement waits once.
        if not self._jiffies_ready:
            time.sleep(self.warmup_seconds)
            self._jiffies_ready = True

    def current_clock_speeds_mhz(self) -> list[int]:
        """Current frequency of every thread in MHz, in thread order."""
        speeds = []
        core_id = 0
        while True:
            value = read_int(_cpufreq_path(core_id, self.root, "scaling_cur_freq"))
            if value == -1:
                break
            speeds.append(_truncating_div(value, 1000))
            core_id += 1
        return speeds

    def current_utilisation(self) -> float:
        """Fraction of time spent working since the previous call, or -1.0."""
        self._init_jiffies()
        current = read_jiffies(0, self._stat_path)
        ratio = _usage_ratio(current, self._last_total, 1.0)
        self._last_total = current
        return ratio

    def thread_utilisation(self, thread_index: int) -> float:
        """Working fraction of one thread since its previous measurement, or -1.0."""
        self._init_jiffies()
        current = read_jiffies(thread_index + 1, self._stat_path)
        last = self._last_threads.get(thread_index, Jiffies())
        ratio = _usage_ratio(current, last, 100.0)
        self._last_threads[thread_index] = current
        return ratio

    def threads_utilisation(self) -> list[float]:
        """Utilisation of every logical core."""
        return [self.thread_utilisation(index) for index in range(max(self.num_logical_cores, 0))]


def parse_cpuinfo(text: str, root: str = "/") -> list[CPU]:
    """Build one :class:`CPU` per physical id from /proc/cpuinfo content."""
    cpus: list[CPU] = []
    physical_id = -1
    next_add = False
    for block in split(text, "\n\n"):
        cpu = CPU(root=root)
        for line in split_char(block, "\n"):
            pairs = split(line, ":")
            if len(pairs) < 2:
                continue
            name = strip(pairs[0])
            value = strip(pairs[1])
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _to_int(split(value, " ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _to_int(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _to_int(value)
            elif name == "flags":
                cpu.flags = split(value, " ")
            elif name == "physical id":
                socket_id = _to_int(value)
                if socket_id == physical_id:
                    continue
                cpu.id = socket_id
                next_add = True
        if next_add:
            cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, root)
            cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, root)
            next_add = False
            physical_id += 1
            cpus.append(cpu)
    return cpus


def get_all_cpus(root: str = "/") -> list[CPU]:
    """Return every CPU socket described by /proc/cpuinfo under ``root``."""
    try:
        with open(os.path.join(root, "proc", "cpuinfo"), encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return []
    return parse_cpuinfo(text, root)