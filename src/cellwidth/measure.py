"""String width measurement."""

from __future__ import annotations

from .resolver import codepoint_width
from .segment import Cluster, iter_clusters


def cluster_width(cluster: Cluster | str, east_asian_width: bool = False) -> int:
    """Return the width of one grapheme cluster.

    The first codepoint with a non-zero width decides the width of the whole
    cluster, so joined emoji count once. A cluster made only of zero-width
    codepoints takes no cells.
    """
    text = cluster.text if isinstance(cluster, Cluster) else cluster
    for ch in text:
        width = codepoint_width(ord(ch), east_asian_width)
        if width > 0:
            return width
    return 0


def string_width(
    text: str,
    east_asian_width: bool = False,
    zero_width_joiner: bool = True,
) -> int:
    """Return the number of terminal cells ``text`` occupies.

    Args:
        text: Text to measure.
        east_asian_width: Render East Asian ambiguous characters two cells wide.
        zero_width_joiner: Measure grapheme clusters instead of single codepoints.

    Returns:
        Width in terminal columns.
    """
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)

    return sum(
        cluster_width(cluster, east_asian_width)
        for cluster in iter_clusters(text, zero_width_joiner)
    )
