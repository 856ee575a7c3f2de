"""Network interface information."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass

import psutil

from hwprobe.sysfs import read_first_line

_UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class Network:
    """A network interface with its first IPv4 and link-local IPv6 address."""

    interface_index: str
    description: str
    mac: str
    ip4: str
    ip6: str


def interface_index(name: str) -> str:
    """Kernel index of interface ``name`` as text, or "<unknown>"."""
    try:
        index = socket.if_nametoindex(name)
    except (OSError, ValueError):
        return _UNKNOWN
    return str(index) if index > 0 else _UNKNOWN


def mac_address(name: str, root: str = "/") -> str:
    """Hardware address of interface ``name`` from sysfs, or "<unknown>"."""
    value = read_first_line(os.path.join(root, "sys", "class", "net", name, "address"))
    return value if value else _UNKNOWN


def _first_ip4(addresses) -> str:
    for address in addresses:
        if address.family == socket.AF_INET:
            return address.address
    return _UNKNOWN


def _first_link_local_ip6(addresses) -> str:
    for address in addresses:
        if address.family == socket.AF_INET6:
            text = address.address.split("%", 1)[0]
            if text.startswith("fe80"):
                return text
    return _UNKNOWN


def get_all_networks(root: str = "/") -> list[Network]:
    """Return every interface that has a link-layer address."""
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        return []
    networks = []
    for name, addresses in interfaces.items():
        if not any(address.family == psutil.AF_LINK for address in addresses):
            continue
        networks.append(
            Network(
                interface_index=interface_index(name),
                description=name,
                mac=mac_address(name, root),
                ip4=_first_ip4(addresses),
                ip6=_first_link_local_ip6(addresses),
            )
        )
    return networks