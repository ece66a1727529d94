"""Convenience functions measuring with the process-wide default condition.

Every function takes an optional ``condition``; when omitted the default
from ``get_default_condition()`` is used.
"""

from __future__ import annotations

from .condition import Condition, get_default_condition


def _resolve(condition: Condition | None) -> Condition:
    return condition if condition is not None else get_default_condition()


def rune_width(char: str | int, condition: Condition | None = None) -> int:
    """Return the number of cells used by one character.

    Example:
        rune_width("世")  # 2
        rune_width("a")   # 1
    """
    return _resolve(condition).rune_width(char)


def string_width(text: str, condition: Condition | None = None) -> int:
    """Return the number of cells ``text`` occupies.

    Example:
        string_width("■㈱の世界①")  # 11
    """
    return _resolve(condition).string_width(text)


def truncate(
    text: str,
    max_width: int,
    tail: str = "",
    condition: Condition | None = None,
) -> str:
    """Truncate ``text`` to ``max_width`` cells, appending ``tail`` when cut.

    Example:
        truncate("hello world", 8, "...")  # "hello..."
    """
    return _resolve(condition).truncate(text, max_width, tail)


def wrap(text: str, width: int, condition: Condition | None = None) -> str:
    """Insert line breaks so no line exceeds ``width`` cells."""
    return _resolve(condition).wrap(text, width)


def fill_left(text: str, width: int, condition: Condition | None = None) -> str:
    """Pad ``text`` on the left with spaces to ``width`` cells."""
    return _resolve(condition).fill_left(text, width)


def fill_right(text: str, width: int, condition: Condition | None = None) -> str:
    """Pad ``text`` on the right with spaces to ``width`` cells."""
    return _resolve(condition).fill_right(text, width)
