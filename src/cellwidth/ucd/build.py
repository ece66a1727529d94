"""Build the width tables from Unicode Character Database files.

Width policy:
- 0 for nonspacing and enclosing marks (Mn, Me), format characters (Cf)
  except SOFT HYPHEN, Hangul medial vowels and final consonants (V, T) and
  ZERO WIDTH SPACE.
- 2 for East Asian Wide and Fullwidth characters, the unassigned parts of the
  CJK ideograph blocks, and Enclosed Alphanumerics.
- Ambiguous characters (A) that are not zero width, wide or private use go in
  a separate table; they are 2 in East Asian mode and 1 otherwise.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, NamedTuple

from ..table import Interval, compact_intervals
from .schema import parse_ranges

logger = logging.getLogger(__name__)

ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf"})
ZERO_WIDTH_HANGUL = frozenset({"V", "T"})
ZERO_WIDTH_EXTRA = frozenset({0x200B})
NOT_ZERO_WIDTH = frozenset({0x00AD})

# Unassigned codepoints in these blocks default to East Asian Wide
CJK_DEFAULT_WIDE = (
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
)

# Enclosed Alphanumerics are drawn double width by CJK-capable terminal fonts
WIDE_EXTRA = ((0x2460, 0x24FF),)

_VERSION_RE = re.compile(r"EastAsianWidth-(\d+\.\d+\.\d+)\.txt")

MODULE_HEADER = '''"""Display width tables.

Generated by ``cellwidth generate`` from Unicode {version} data. Do not edit.

Each entry is ``(first, last, width)``. Codepoints not covered by
``DEFAULT_TABLE`` are one column wide. ``AMBIGUOUS_TABLE`` lists the East Asian
ambiguous codepoints that become two columns wide in East Asian mode.
"""

UNICODE_VERSION = "{version}"
'''


class Tables(NamedTuple):
    version: str
    default: tuple[Interval, ...]
    ambiguous: tuple[Interval, ...]


def unicode_version(east_asian_width_text: str) -> str:
    """Read the Unicode version from the EastAsianWidth.txt header."""
    m = _VERSION_RE.search(east_asian_width_text)
    if m is None:
        raise ValueError("Could not find Unicode version in EastAsianWidth.txt")
    return m.group(1)


def to_intervals(codepoints: Iterable[int], width: int) -> list[Interval]:
    """Collapse codepoints into runs of consecutive values."""
    runs: list[Interval] = []
    for cp in sorted(codepoints):
        if runs and runs[-1].last == cp - 1:
            runs[-1] = runs[-1]._replace(last=cp)
        else:
            runs.append(Interval(cp, cp, width))
    return runs


def classify(
    east_asian_width_text: str,
    general_category_text: str,
    hangul_syllable_type_text: str,
) -> tuple[set[int], set[int], set[int]]:
    """Split codepoints into zero-width, wide and ambiguous sets."""
    zero: set[int] = set(ZERO_WIDTH_EXTRA)
    private: set[int] = set()
    for record in parse_ranges(general_category_text.splitlines()):
        if record.value in ZERO_WIDTH_CATEGORIES:
            zero.update(record.codepoints())
        elif record.value == "Co":
            private.update(record.codepoints())
    for record in parse_ranges(hangul_syllable_type_text.splitlines()):
        if record.value in ZERO_WIDTH_HANGUL:
            zero.update(record.codepoints())
    zero -= NOT_ZERO_WIDTH

    wide: set[int] = set()
    ambiguous: set[int] = set()
    for record in parse_ranges(east_asian_width_text.splitlines()):
        if record.value in ("W", "F"):
            wide.update(record.codepoints())
        elif record.value == "A":
            ambiguous.update(record.codepoints())
    for first, last in CJK_DEFAULT_WIDE + WIDE_EXTRA:
        wide.update(range(first, last + 1))

    wide -= zero
    ambiguous -= zero | wide | private
    logger.info(f"Classified {len(zero)} zero-width, {len(wide)} wide, {len(ambiguous)} ambiguous")
    return zero, wide, ambiguous


def build_tables(files: dict[str, str]) -> Tables:
    """Build compacted tables from the texts returned by ``sync.fetch_ucd``."""
    eaw = files["EastAsianWidth.txt"]
    zero, wide, ambiguous = classify(
        eaw,
        files["extracted/DerivedGeneralCategory.txt"],
        files["HangulSyllableType.txt"],
    )
    default = compact_intervals(to_intervals(zero, 0) + to_intervals(wide, 2), "default")
    ambiguous_table = compact_intervals(to_intervals(ambiguous, 2), "ambiguous")
    logger.info(f"Built {len(default)} default and {len(ambiguous_table)} ambiguous intervals")
    return Tables(unicode_version(eaw), default, ambiguous_table)


def _render_table(name: str, table: Iterable[Interval]) -> list[str]:
    lines = [f"{name} = ("]
    lines.extend(f"    (0x{e.first:04X}, 0x{e.last:04X}, {e.width})," for e in table)
    lines.append(")")
    return lines


def render_module(tables: Tables) -> str:
    """Render the source of the ``_table`` module."""
    lines = [MODULE_HEADER.format(version=tables.version)]
    lines.extend(_render_table("DEFAULT_TABLE", tables.default))
    lines.append("")
    lines.extend(_render_table("AMBIGUOUS_TABLE", tables.ambiguous))
    return "\n".join(lines) + "\n"


def write_module(tables: Tables, path: Path) -> None:
    path.write_text(render_module(tables), encoding="utf-8")
    logger.info(f"Wrote {path}")
