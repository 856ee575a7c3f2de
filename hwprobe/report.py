"""Plain-text hardware report and the command that prints it."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence

from hwprobe.battery import Battery, get_all_batteries
from hwprobe.cpu import CPU, get_all_cpus
from hwprobe.disk import Disk, get_all_disks
from hwprobe.gpu import GPU, get_all_gpus
from hwprobe.mainboard import MainBoard, read_mainboard
from hwprobe.network import Network, get_all_networks
from hwprobe.os_info import OSInfo, read_os
from hwprobe.ram import Memory
from hwprobe.units import bytes_to_mib

_CPU_HEADER = "----------------------------------- CPU ------------------------------------\n"
_OS_HEADER = "----------------------------------- OS ------------------------------------\n"
_GPU_HEADER = "----------------------------------- GPU -----------------------------------\n"
_RAM_HEADER = "----------------------------------- RAM -----------------------------------\n"
_BOARD_HEADER = "------------------------------- Main Board --------------------------------\n"
_BATTERY_HEADER = "------------------------------- Batteries ---------------------------------\n"
_DISK_HEADER = "--------------------------------- Disks -----------------------------------\n"
_NETWORK_HEADER = "--------------------------------- Networks -----------------------------------\n"


def _fmt(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


def _row(label: str, value: object) -> str:
    return f"{label:<20} {_fmt(value)}\n"


def _cpu_section(cpus: Iterable[CPU]) -> Iterable[str]:
    yield _CPU_HEADER
    for cpu in cpus:
        yield f"Socket {cpu.id}:\n"
        yield _row("vendor:", cpu.vendor)
        yield _row("model:", cpu.model_name)
        yield _row("physical cores:", cpu.num_physical_cores)
        yield _row("logical cores:", cpu.num_logical_cores)
        yield _row("max frequency:", cpu.max_clock_speed_mhz)
        yield _row("regular frequency:", cpu.regular_clock_speed_mhz)
        yield _row(
            "cache size:",
            f"L1: {cpu.l1_cache_size_bytes}, L2: {cpu.l2_cache_size_bytes}, L3: {cpu.l3_cache_size_bytes}",
        )
        utilisation = cpu.threads_utilisation()
        speeds = cpu.current_clock_speeds_mhz()
        for thread_id, (speed, usage) in enumerate(zip(speeds, utilisation)):
            yield f"{' ':<20} Thread {thread_id}: {speed} MHz ({_fmt(usage * 100)}%)\n"


def _os_section(os_info: OSInfo) -> Iterable[str]:
    yield _OS_HEADER
    yield _row("Operating System:", os_info.name)
    yield _row("version:", os_info.version)
    yield _row("kernel:", os_info.kernel)
    yield _row("architecture:", "32 bit" if os_info.is_32bit else "64 bit")
    yield _row("endianess:", "little endian" if os_info.is_little_endian else "big endian")


def _gpu_section(gpus: Iterable[GPU]) -> Iterable[str]:
    yield _GPU_HEADER
    for gpu in gpus:
        yield f"GPU {gpu.id}:\n"
        yield _row("vendor:", gpu.vendor)
        yield _row("model:", gpu.name)
        yield _row("driverVersion:", gpu.driver_version)
        yield _row("memory [MiB]:", bytes_to_mib(gpu.memory_bytes))
        yield _row("frequency:", gpu.frequency_mhz)
        yield _row("cores:", gpu.num_cores)
        yield _row("vendor_id:", gpu.vendor_id)
        yield _row("device_id:", gpu.device_id)


def _ram_section(memory: Memory) -> Iterable[str]:
    yield _RAM_HEADER
    yield _row("size [MiB]:", bytes_to_mib(memory.total_bytes()))
    yield _row("free [MiB]:", bytes_to_mib(memory.free_bytes()))
    yield _row("available [MiB]:", bytes_to_mib(memory.available_bytes()))
    for module in memory.modules:
        frequency = -1.0 if module.frequency_hz == -1 else module.frequency_hz / 1e6
        yield f"RAM {module.id}:\n"
        yield _row("vendor:", module.vendor)
        yield _row("model:", module.model)
        yield _row("name:", module.name)
        yield _row("serial-number:", module.serial_number)
        yield _row("Frequency [MHz]:", frequency)


def _board_section(board: MainBoard) -> Iterable[str]:
    yield _BOARD_HEADER
    yield _row("vendor:", board.vendor)
    yield _row("name:", board.name)
    yield _row("version:", board.version)
    yield _row("serial-number:", board.serial_number)


def _battery_section(batteries: Sequence[Battery]) -> Iterable[str]:
    yield _BATTERY_HEADER
    if not batteries:
        yield "No Batteries installed or detected\n"
        return
    for counter, battery in enumerate(batteries):
        yield f"Battery {counter}:\n"
        yield _row("vendor:", battery.vendor)
        yield _row("model:", battery.model)
        yield _row("serial-number:", battery.serial_number)
        yield _row("charging:", "yes" if battery.charging() else "no")
        yield _row("capacity:", battery.capacity())


def _disk_section(disks: Sequence[Disk]) -> Iterable[str]:
    yield _DISK_HEADER
    if not disks:
        yield "No Disks installed or detected\n"
        return
    for counter, disk in enumerate(disks):
        yield f"Disk {counter}:\n"
        yield _row("vendor:", disk.vendor)
        yield _row("model:", disk.model)
        yield _row("serial-number:", disk.serial_number)
        yield _row("size:", disk.size_bytes)


def _network_section(networks: Sequence[Network]) -> Iterable[str]:
    yield _NETWORK_HEADER
    if not networks:
        yield "No Networks installed or detected\n"
        return
    addressed = (network for network in networks if network.ip4 or network.ip6)
    for counter, network in enumerate(addressed):
        yield f"Network {counter}:\n"
        yield _row("description:", network.description)
        yield _row("interface index:", network.interface_index)
        yield _row("mac:", network.mac)
        yield _row("ipv4:", network.ip4)
        yield _row("ipv6:", network.ip6)


def render_report(
    cpus: Sequence[CPU],
    os_info: OSInfo,
    gpus: Sequence[GPU],
    memory: Memory,
    mainboard: MainBoard,
    batteries: Sequence[Battery],
    disks: Sequence[Disk],
    networks: Sequence[Network],
) -> str:
    """Render the hardware report as text."""
    parts = ["Hardware Report:\n\n"]
    parts.extend(_cpu_section(cpus))
    parts.extend(_os_section(os_info))
    parts.extend(_gpu_section(gpus))
    parts.extend(_ram_section(memory))
    parts.extend(_board_section(mainboard))
    parts.extend(_battery_section(batteries))
    parts.extend(_disk_section(disks))
    parts.extend(_network_section(networks))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Gather hardware information and print the report."""
    parser = argparse.ArgumentParser(description="Print a hardware and system report.")
    parser.add_argument("--root", default="/", help="file system root to read system files from")
    args = parser.parse_args(argv)
    root = args.root
    report = render_report(
        cpus=get_all_cpus(root),
        os_info=read_os(root),
        gpus=get_all_gpus(root),
        memory=Memory(root),
        mainboard=read_mainboard(root),
        batteries=get_all_batteries(root),
        disks=get_all_disks(root),
        networks=get_all_networks(root),
    )
    print(report, end="")
    return 0