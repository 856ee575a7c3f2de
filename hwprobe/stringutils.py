"""Small string helpers used when parsing kernel and database text files."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n"


def replace_once(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old`` in ``text`` with ``new``."""
    return text.replace(old, new, 1)


def strip(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def count_substring(text: str, substring: str) -> int:
    """Count non-overlapping occurrences of ``substring`` in ``text``."""
    if not substring:
        raise ValueError("substring must not be empty")
    return text.count(substring)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``, keeping the piece after the last one."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def split_char(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at ``delimiter``, dropping whatever follows the last delimiter.

    Only pieces that are terminated by a delimiter are returned, so text
    without any delimiter yields an empty list.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)[:-1]


def split_get_index(text: str, delimiter: str, index: int) -> str:
    """Return the piece at ``index`` of ``text`` split at ``delimiter``.

    Negative indices count from the end; an index out of range gives "".
    """
    parts = split(text, delimiter)
    if index < 0:
        index += len(parts)
    if 0 <= index < len(parts):
        return parts[index]
    return ""


def get_value(data: Sequence[T], index: int, default: T) -> T:
    """Return ``data[index]`` or ``default`` when the index is out of range."""
    if 0 <= index < len(data):
        return data[index]
    return default