# hwprobe

hwprobe collects hardware and system information on Linux. It reads the files under `/proc` and `/sys` and reports on:

- CPU sockets (`hwprobe.cpu`): vendor, model, physical and logical core counts, maximum and base clock speed, cache size from `/proc/cpuinfo`, current per-thread clock speeds, and utilisation worked out from `/proc/stat`
- the operating system (`hwprobe.os_info`): pretty name and version from `/etc/os-release`, kernel release, word size and byte order
- GPUs (`hwprobe.gpu`): the cards under `/sys/class/drm`. Vendor and device names come from the system's `pci.ids` table (`hwprobe.pcimapper`)
- memory (`hwprobe.ram`): total, free and available bytes from `/proc/meminfo`. If a figure is missing there, it is taken from `sysconf` instead
- the main board (`hwprobe.mainboard`): vendor, name, version and serial number from the DMI tables
- batteries (`hwprobe.battery`): `BAT0`, `BAT1`, … under `/sys/class/power_supply`
- disks (`hwprobe.disk`): whole disks under `/sys/class/block`. Partitions are skipped
- network interfaces (`hwprobe.network`): interface index, MAC address, first IPv4 address and link-local IPv6 address. Addresses are read through `psutil`

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Command line

```
hwprobe
hwprobe --root /path/to/snapshot
```

The command prints a report in these sections: CPU, OS, GPU, RAM, Main Board, Batteries, Disks and Networks. When a value cannot be read, the report shows `<unknown>` for text and `-1` for numbers. A battery whose full-energy figure is 0 reports its capacity as `nan` or `inf`.

`--root` sets the directory in which the `proc`, `sys`, `etc` and `lib64` files are looked up. Interface addresses and the kernel release always describe the running system.

Utilisation needs two readings to compare. The first measurement on each `CPU` object therefore waits `warmup_seconds` (one second by default). As a result the report takes about a second for each CPU socket.

## Library use

```python
from hwprobe.cpu import get_all_cpus
from hwprobe.ram import Memory
from hwprobe.units import bytes_to_mib

for cpu in get_all_cpus():
    print(cpu.vendor, cpu.model_name, cpu.current_clock_speeds_mhz())
    print(cpu.threads_utilisation())

memory = Memory()
print(bytes_to_mib(memory.total_bytes()), "MiB total")
print(bytes_to_mib(memory.available_bytes()), "MiB available")
```

The readers take a `root` argument, which defaults to `/`. This lets them read a copied snapshot or a test fixture:

```python
from hwprobe.battery import get_all_batteries
from hwprobe.mainboard import read_mainboard
from hwprobe.os_info import read_os

board = read_mainboard(root="/tmp/snapshot")
for battery in get_all_batteries(root="/tmp/snapshot"):
    print(battery.vendor, battery.capacity(), battery.charging())
print(read_os(root="/tmp/snapshot").name)
```

Some modules also work on text you pass in directly:

- `hwprobe.cpu.parse_cpuinfo` parses `/proc/cpuinfo` content
- `hwprobe.ram.parse_meminfo` parses `/proc/meminfo` content
- `hwprobe.os_info.parse_os_release` parses `os-release` content
- `hwprobe.pcimapper.PCIMapper(text)` builds a lookup from `pci.ids` content, for example `PCIMapper(text)["8086"]["0x1234"].device_name`. Unknown ids map to the name `invalid`

`hwprobe.report.render_report` returns the full report as a string.

## What it does not do

- Only Linux is supported. Nothing is read on Windows or macOS.
- GPU driver version, memory size and core count are never filled in. They stay at empty and `0`.
- Memory is reported as one module covering all of RAM. Vendor, model, serial number and frequency are not read, so they show `<unknown>` and `-1`.
- L1 and L2 cache sizes are not read. Only the cache size listed in `/proc/cpuinfo` is reported, and it is stored as the L3 size.
- CPU temperature is not reported.

## Tests

```
pytest
```