"""Records parsed from Unicode Character Database property files."""

import re
from typing import Iterable, Iterator

from pydantic import BaseModel, model_validator

from ..table import MAX_CODEPOINT

# "0000..001F    ; Cc # ..." or "00A1 ; A # ..."
_LINE_RE = re.compile(r"^([0-9A-Fa-f]+)(?:\.\.([0-9A-Fa-f]+))?\s*;\s*([\w.]+)")


class UcdRange(BaseModel):
    """A codepoint range carrying one property value."""

    first: int
    last: int
    value: str

    @model_validator(mode="after")
    def _check_range(self) -> "UcdRange":
        if not 0 <= self.first <= self.last <= MAX_CODEPOINT:
            raise ValueError(f"invalid codepoint range {self.first:04X}..{self.last:04X}")
        return self

    @classmethod
    def from_line(cls, line: str) -> "UcdRange | None":
        """Parse one data line. Returns None for blank and comment lines."""
        line = line.split("#", 1)[0].strip()
        if not line:
            return None
        m = _LINE_RE.match(line)
        if m is None:
            raise ValueError(f"unparseable UCD line: {line!r}")
        first = int(m.group(1), 16)
        last = int(m.group(2), 16) if m.group(2) else first
        return cls(first=first, last=last, value=m.group(3))

    def codepoints(self) -> range:
        return range(self.first, self.last + 1)


def parse_ranges(lines: Iterable[str]) -> Iterator[UcdRange]:
    """Parse every data line of a UCD property file."""
    for line in lines:
        record = UcdRange.from_line(line)
        if record is not None:
            yield record
