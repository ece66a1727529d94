"""Tests for width tables."""

import pytest

from cellwidth import (
    AMBIGUOUS_TABLE,
    DEFAULT_TABLE,
    Interval,
    TableError,
    WidthTable,
    compact_intervals,
    validate_table,
)
from cellwidth.table import MAX_CODEPOINT, check_interval


class TestInterval:
    def test_contains(self):
        interval = Interval(0x0300, 0x036F, 0)
        assert 0x0300 in interval
        assert 0x036F in interval
        assert 0x0370 not in interval
        assert "x" not in interval

    def test_check_interval(self):
        assert check_interval(Interval(0, 0, 1))
        assert check_interval(Interval(0, MAX_CODEPOINT, 2))
        assert not check_interval(Interval(5, 4, 1))
        assert not check_interval(Interval(-1, 4, 1))
        assert not check_interval(Interval(0, MAX_CODEPOINT + 1, 1))
        assert not check_interval(Interval(0, 1, 3))

    def test_str(self):
        assert str(Interval(0x1100, 0x115F, 2)) == "U+1100..U+115F=2"


class TestValidateTable:
    def test_valid(self):
        table = validate_table([(1, 2, 0), (3, 4, 2), (6, 6, 0)])
        assert table == (Interval(1, 2, 0), Interval(3, 4, 2), Interval(6, 6, 0))

    def test_empty(self):
        assert validate_table([]) == ()

    def test_invalid_interval(self):
        with pytest.raises(TableError, match="index 1"):
            validate_table([(1, 2, 0), (5, 4, 2)], "demo")

    def test_unordered(self):
        with pytest.raises(TableError, match="unordered"):
            validate_table([(10, 12, 0), (1, 2, 0)])

    def test_overlap(self):
        with pytest.raises(TableError, match="overlapping"):
            validate_table([(1, 5, 0), (5, 8, 2)])

    def test_not_compact(self):
        with pytest.raises(TableError, match="not compact"):
            validate_table([(1, 5, 2), (6, 8, 2)])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_table([(2, 1, 0)])


class TestCompactIntervals:
    def test_sorts_and_merges(self):
        table = compact_intervals([(6, 8, 2), (1, 5, 2), (10, 10, 0)])
        assert table == (Interval(1, 8, 2), Interval(10, 10, 0))

    def test_merges_overlap_same_width(self):
        table = compact_intervals([(1, 5, 0), (3, 9, 0), (4, 6, 0)])
        assert table == (Interval(1, 9, 0),)

    def test_keeps_touching_different_widths(self):
        table = compact_intervals([(1, 5, 0), (6, 9, 2)])
        assert table == (Interval(1, 5, 0), Interval(6, 9, 2))

    def test_conflicting_overlap(self):
        with pytest.raises(TableError, match="conflicting"):
            compact_intervals([(1, 5, 0), (4, 9, 2)])

    def test_invalid_entry(self):
        with pytest.raises(TableError):
            compact_intervals([(9, 1, 0)])


class TestWidthTable:
    @pytest.fixture
    def table(self):
        return WidthTable([(0x10, 0x1F, 0), (0x30, 0x30, 2), (0x40, 0x4F, 0)], "demo")

    def test_lookup_inside(self, table):
        assert table.lookup(0x10) == 0
        assert table.lookup(0x1F) == 0
        assert table.lookup(0x30) == 2
        assert table.lookup(0x4F) == 0

    def test_lookup_gap(self, table):
        assert table.lookup(0x20) is None
        assert table.lookup(0x20, default=1) == 1

    def test_lookup_outside(self, table):
        assert table.lookup(0x05, default=1) == 1
        assert table.lookup(0x50, default=1) == 1

    def test_find(self, table):
        assert table.find(0x45) == Interval(0x40, 0x4F, 0)
        assert table.find(0x2F) is None

    def test_container(self, table):
        assert len(table) == 3
        assert list(table)[1] == Interval(0x30, 0x30, 2)
        assert 0x30 in table
        assert 0x31 not in table
        assert table.name == "demo"

    def test_empty(self):
        table = WidthTable([])
        assert table.lookup(0x41, default=1) == 1

    def test_rejects_invalid(self):
        with pytest.raises(TableError):
            WidthTable([(5, 9, 2), (6, 7, 2)])


class TestBundledTables:
    def test_default_table_is_compact(self):
        validate_table(DEFAULT_TABLE, "default")

    def test_ambiguous_table_is_compact(self):
        validate_table(AMBIGUOUS_TABLE, "ambiguous")

    def test_default_widths(self):
        assert {e.width for e in DEFAULT_TABLE} <= {0, 2}

    def test_ambiguous_widths(self):
        assert {e.width for e in AMBIGUOUS_TABLE} == {2}

    def test_ambiguous_disjoint_from_default(self):
        for amb in AMBIGUOUS_TABLE:
            for entry in DEFAULT_TABLE:
                assert entry.last < amb.first or amb.last < entry.first, (amb, entry)

    def test_tables_skip_ascii_and_controls(self):
        assert DEFAULT_TABLE.intervals[0].first >= 0xA0
        assert AMBIGUOUS_TABLE.intervals[0].first >= 0xA0

    def test_known_entries(self):
        assert DEFAULT_TABLE.lookup(0x0301) == 0  # COMBINING ACUTE ACCENT
        assert DEFAULT_TABLE.lookup(0x200D) == 0  # ZERO WIDTH JOINER
        assert DEFAULT_TABLE.lookup(0x4E16) == 2  # 世
        assert DEFAULT_TABLE.lookup(0x1F373) == 2  # COOKING
        assert AMBIGUOUS_TABLE.lookup(0x2606) == 2  # WHITE STAR
