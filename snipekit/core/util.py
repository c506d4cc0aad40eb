"""
Miscellaneous helpers.

Path: snipekit/core/util.py
"""

import os
import time
from typing import Optional, Union


_BOOL_VALUES = (
    "0", "1",
    "n", "y",
    "no", "yes",
    "off", "on",
    "false", "true",
    "disabled", "enabled",
)

_DEFAULT_SEPARATORS = "/\\" if os.name == "nt" else "/"


def bool_value(value: Union[str, bool, None]) -> int:
    """
    Convert a string to a boolean.

    Args:
        value: String such as "yes", "off", "enabled". None counts as true
               (a bare option with no value). Booleans pass through.

    Returns:
        1 for true, 0 for false, -1 if the string is not recognized.
    """
    if value is None:
        return 1
    if isinstance(value, bool):
        return int(value)

    try:
        index = _BOOL_VALUES.index(str(value).lower())
    except ValueError:
        return -1
    return index % 2


def null_str(value: Optional[str]) -> str:
    """Return value, or "(null)" if it is None."""
    return value if value is not None else "(null)"


def timestamp() -> str:
    """Current local date/time in the locale's format."""
    return time.strftime("%c", time.localtime())


def basename(name: Optional[str], separators: str = _DEFAULT_SEPARATORS) -> Optional[str]:
    """
    Final component of a path, ignoring trailing separators.

    basename("a/b/") -> "b", basename("/") -> "/", basename("") -> "."
    """
    if name is None:
        return None
    if not name:
        return "."

    stripped = name.rstrip(separators)
    if not stripped:
        return "/"

    for i in range(len(stripped) - 1, -1, -1):
        if stripped[i] in separators:
            return stripped[i + 1:]
    return stripped


def dirname(name: Optional[str], separators: str = _DEFAULT_SEPARATORS) -> Optional[str]:
    """
    Parent directory of a path, ignoring trailing separators.

    dirname("a/b") -> "a", dirname("a") -> ".", dirname("/a") -> "/"
    """
    if name is None:
        return None
    if not name:
        return "."

    stripped = name.rstrip(separators)
    if not stripped:
        return "/"

    cut = -1
    for i in range(len(stripped) - 1, -1, -1):
        if stripped[i] in separators:
            cut = i
            break

    if cut < 0:
        return "."

    parent = stripped[:cut].rstrip(separators)
    return parent or "/"
