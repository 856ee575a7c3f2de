"""Hardware and system information gathered from Linux procfs and sysfs."""

__version__ = "0.1.0"

__all__ = [
    "battery",
    "cpu",
    "disk",
    "gpu",
    "mainboard",
    "network",
    "os_info",
    "pcimapper",
    "ram",
    "report",
    "stringutils",
    "sysfs",
    "units",
]