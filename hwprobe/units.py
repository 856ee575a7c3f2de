"""Unit conversions."""

MIB_BYTES = 2**20


def bytes_to_mib(num_bytes: int) -> float:
    """Convert a number of bytes to mebibytes."""
    return num_bytes / MIB_BYTES