"""Lookup of PCI vendor and device names from a pci.ids database."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from hwprobe.stringutils import split, strip

_INVALID_ID = "0000"
_INVALID_NAME = "invalid"

_PCI_IDS_LOCATIONS = (
    "/usr/share/hwdata/pci.ids",
    "/usr/share/misc/pci.ids",
    "/usr/share/pci.ids",
)


def _strip_hex_prefix(identifier: str) -> str:
    return identifier[2:] if identifier.startswith("0x") else identifier


@dataclass
class PCIDevice:
    """A PCI device and the subsystems listed for it."""

    device_id: str
    device_name: str
    subsystems: dict[str, str] = field(default_factory=dict)


@dataclass
class PCIVendor:
    """A PCI vendor and its devices."""

    vendor_id: str
    vendor_name: str
    devices: dict[str, PCIDevice] = field(default_factory=dict)

    def __getitem__(self, device_id: str) -> PCIDevice:
        """Return the device with ``device_id`` (an optional "0x" is ignored)."""
        device = self.devices.get(_strip_hex_prefix(device_id))
        if device is None:
            return PCIDevice(_INVALID_ID, _INVALID_NAME)
        return device


def _read_system_pci_ids() -> str:
    for location in _PCI_IDS_LOCATIONS:
        try:
            return Path(location).read_text(encoding="utf-8", errors="replace")
        except OSError:
            continue
    return ""


class PCIMapper:
    """Maps PCI vendor and device ids to names.

    ``text`` is the content of a pci.ids file; when omitted, the system's
    copy is read if one can be found.
    """

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            text = _read_system_pci_ids()
        self.vendors: dict[str, PCIVendor] = {}
        self._parse(text)

    def _parse(self, text: str) -> None:
        vendor: PCIVendor | None = None
        device: PCIDevice | None = None
        for line in text.split("\n"):
            if not line or line.startswith("#"):
                continue
            fields = split(strip(line), "  ")
            if len(fields) != 2:
                continue
            key, name = fields
            if line.startswith("\t\t"):
                if device is not None:
                    device.subsystems.setdefault(key, name)
            elif line.startswith("\t"):
                if vendor is not None:
                    device = vendor.devices.setdefault(key, PCIDevice(key, name))
            else:
                vendor = self.vendors.setdefault(key, PCIVendor(key, name))

    def vendor_from_id(self, vendor_id: str) -> PCIVendor:
        """Return the vendor with ``vendor_id`` (an optional "0x" is ignored)."""
        vendor = self.vendors.get(_strip_hex_prefix(vendor_id))
        if vendor is None:
            return PCIVendor(_INVALID_ID, _INVALID_NAME)
        return vendor

    def __getitem__(self, vendor_id: str) -> PCIVendor:
        return self.vendor_from_id(vendor_id)