"""Grapheme cluster iteration.

Segmentation itself is done by the ``grapheme`` package. This module only
adds source offsets and a per-codepoint fallback for terminals that draw
every codepoint separately.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

import grapheme


class Cluster(NamedTuple):
    """One user-perceived character and its span in the source string.

    ``start`` and ``end`` are str indices (``text == source[start:end]``),
    not UTF-8 byte offsets.
    """

    text: str
    start: int
    end: int

    @property
    def codepoints(self) -> list[int]:
        return [ord(ch) for ch in self.text]

    @property
    def is_newline(self) -> bool:
        """True for a line feed, including a CR LF pair."""
        return self.text.endswith("\n")


def iter_clusters(text: str, zero_width_joiner: bool = True) -> Iterator[Cluster]:
    """Yield the clusters of ``text`` in order.

    With ``zero_width_joiner`` off every codepoint is yielded as its own
    cluster.
    """
    if not zero_width_joiner:
        for i, ch in enumerate(text):
            yield Cluster(ch, i, i + 1)
        return

    pos = 0
    for chunk in grapheme.graphemes(text):
        end = pos + len(chunk)
        yield Cluster(chunk, pos, end)
        pos = end
