"""Interval tables mapping codepoint ranges to display widths."""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from . import _table

MAX_CODEPOINT = 0x10FFFF


class TableError(ValueError):
    """Raised when a width table breaks ordering or compactness rules."""

    pass


class Interval(NamedTuple):
    """Closed codepoint range ``[first, last]`` rendered ``width`` columns wide."""

    first: int
    last: int
    width: int

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.first <= codepoint <= self.last

    def __str__(self) -> str:
        return f"U+{self.first:04X}..U+{self.last:04X}={self.width}"


def check_interval(interval: Interval) -> bool:
    """Check that an interval lies inside the codepoint space and has a known width."""
    first, last, width = interval
    return 0 <= first <= last <= MAX_CODEPOINT and width in (0, 1, 2)


def validate_table(intervals: Iterable[Interval], name: str = "table") -> tuple[Interval, ...]:
    """Validate a table and return it as a tuple of Intervals.

    A valid table is strictly increasing by ``first``, has no overlapping
    intervals, and no two neighbours that touch and share a width (those
    should have been merged into one entry).

    Raises:
        TableError: On the first violation, naming the table and index.
    """
    table = tuple(Interval(*entry) for entry in intervals)
    for i, entry in enumerate(table):
        if not check_interval(entry):
            raise TableError(f"table invalid: {name} index {i} {entry}")
        if i == 0:
            continue
        prev = table[i - 1]
        if entry.first <= prev.last:
            raise TableError(f"table unordered or overlapping: {name} index {i} {prev} {entry}")
        if entry.first == prev.last + 1 and entry.width == prev.width:
            raise TableError(f"table not compact: {name} index {i} {prev} {entry}")
    return table


def compact_intervals(intervals: Iterable[Interval], name: str = "table") -> tuple[Interval, ...]:
    """Sort intervals and merge neighbours that overlap or touch with equal width.

    Used when building tables. Overlapping intervals with different widths
    cannot be merged and raise TableError.
    """
    ordered = sorted((Interval(*entry) for entry in intervals), key=lambda e: (e.first, e.last))

    merged: list[Interval] = []
    for entry in ordered:
        if not check_interval(entry):
            raise TableError(f"table invalid: {name} {entry}")
        if merged:
            prev = merged[-1]
            if entry.first <= prev.last:
                if entry.width != prev.width:
                    raise TableError(f"conflicting widths: {name} {prev} {entry}")
                merged[-1] = prev._replace(last=max(prev.last, entry.last))
                continue
            if entry.first == prev.last + 1 and entry.width == prev.width:
                merged[-1] = prev._replace(last=entry.last)
                continue
        merged.append(entry)

    return validate_table(merged, name)


class WidthTable:
    """Immutable, sorted interval table with binary-search lookup.

    Example:
        table = WidthTable([(0x0300, 0x036F, 0), (0x1100, 0x115F, 2)])
        table.lookup(0x0301)  # 0
        table.lookup(0x0041)  # None
    """

    __slots__ = ("_name", "_intervals")

    def __init__(self, intervals: Iterable[Interval], name: str = "table"):
        self._name = name
        self._intervals = validate_table(intervals, name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self._intervals

    def find(self, codepoint: int) -> Interval | None:
        """Return the interval containing ``codepoint``, if any."""
        table = self._intervals
        if not table or codepoint < table[0].first or codepoint > table[-1].last:
            return None

        bot = 0
        top = len(table) - 1
        while bot <= top:
            mid = (bot + top) >> 1
            entry = table[mid]
            if entry.last < codepoint:
                bot = mid + 1
            elif entry.first > codepoint:
                top = mid - 1
            else:
                return entry
        return None

    def lookup(self, codepoint: int, default: int | None = None) -> int | None:
        """Return the stored width for ``codepoint``, or ``default`` when in a gap."""
        entry = self.find(codepoint)
        if entry is None:
            return default
        return entry.width

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.find(codepoint) is not None

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __repr__(self) -> str:
        return f"WidthTable({self._name!r}, {len(self._intervals)} intervals)"


UNICODE_VERSION = _table.UNICODE_VERSION

# Narrow-preferring widths; codepoints in gaps are one column wide.
DEFAULT_TABLE = WidthTable(_table.DEFAULT_TABLE, "default")

# East Asian ambiguous codepoints, all width 2. Consulted before DEFAULT_TABLE
# in East Asian mode.
AMBIGUOUS_TABLE = WidthTable(_table.AMBIGUOUS_TABLE, "ambiguous")
