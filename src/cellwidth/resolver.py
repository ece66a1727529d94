"""Single-codepoint display width."""

from __future__ import annotations

from .table import AMBIGUOUS_TABLE, DEFAULT_TABLE, MAX_CODEPOINT


def codepoint_width(codepoint: int, east_asian_width: bool = False) -> int:
    """Return the number of terminal cells used by ``codepoint``.

    Control characters (C0, DEL and C1) and NUL take no cells, printable ASCII
    takes one. Everything else comes from the width tables; codepoints not in
    any table take one cell. In East Asian mode ambiguous codepoints take two.
    Codepoints outside the Unicode range take no cells.

    See http://www.unicode.org/reports/tr11/
    """
    if codepoint == 0:
        return 0
    if 0 < codepoint < 0x20:
        return 0
    if 0x20 <= codepoint < 0x7F:
        return 1
    if 0x7F <= codepoint < 0xA0:
        return 0
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        return 0

    if east_asian_width:
        width = AMBIGUOUS_TABLE.lookup(codepoint)
        if width is not None:
            return width
    return DEFAULT_TABLE.lookup(codepoint, default=1)


def rune_width(char: str | int, east_asian_width: bool = False) -> int:
    """Return the display width of one character.

    Args:
        char: A single-character string or an integer codepoint.
        east_asian_width: Render East Asian ambiguous characters two cells wide.

    Returns:
        0, 1 or 2.

    Raises:
        TypeError: If ``char`` is a string that is not exactly one character.
    """
    if isinstance(char, str):
        char = ord(char)
    return codepoint_width(char, east_asian_width)
