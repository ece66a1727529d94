"""Column-budgeted text layout: truncate, wrap and pad."""

from __future__ import annotations

from .measure import cluster_width, string_width
from .segment import iter_clusters


def truncate(
    text: str,
    max_width: int,
    tail: str = "",
    east_asian_width: bool = False,
    zero_width_joiner: bool = True,
) -> str:
    """Truncate text to fit within max_width columns.

    Text that already fits is returned unchanged. Otherwise the text is cut
    at a cluster boundary and ``tail`` is appended, keeping the result within
    ``max_width``. A cluster landing exactly on the budget is kept.

    When ``tail`` alone is wider than ``max_width`` the tail itself is
    truncated to ``max_width`` (empty for ``max_width <= 0``).

    Args:
        text: Text to truncate
        max_width: Maximum visible width
        tail: String to append when truncated

    Returns:
        Truncated text with tail if needed
    """
    if string_width(text, east_asian_width, zero_width_joiner) <= max_width:
        return text

    budget = max_width - string_width(tail, east_asian_width, zero_width_joiner)
    if budget < 0:
        if max_width <= 0:
            return ""
        return truncate(tail, max_width, "", east_asian_width, zero_width_joiner)

    width = 0
    pos = len(text)
    for cluster in iter_clusters(text, zero_width_joiner):
        cw = cluster_width(cluster, east_asian_width)
        if width + cw > budget:
            pos = cluster.start
            break
        width += cw

    return text[:pos] + tail


def wrap(
    text: str,
    width: int,
    east_asian_width: bool = False,
    zero_width_joiner: bool = True,
) -> str:
    """Break text into lines of at most ``width`` columns.

    Breaks fall between grapheme clusters with no regard for words. Existing
    line feeds are kept and reset the column count. A break goes before any
    cluster that would overflow the current line, even an empty one, so a
    cluster wider than ``width`` is preceded by a line feed.
    """
    out: list[str] = []
    column = 0
    for cluster in iter_clusters(text, zero_width_joiner):
        if cluster.is_newline:
            out.append(cluster.text)
            column = 0
            continue

        cw = cluster_width(cluster, east_asian_width)
        if column + cw > width:
            out.append("\n")
            column = 0
        out.append(cluster.text)
        column += cw

    return "".join(out)


def fill_left(
    text: str,
    width: int,
    east_asian_width: bool = False,
    zero_width_joiner: bool = True,
) -> str:
    """Right-align text by padding with spaces on the left up to ``width`` columns."""
    count = width - string_width(text, east_asian_width, zero_width_joiner)
    if count > 0:
        return " " * count + text
    return text


def fill_right(
    text: str,
    width: int,
    east_asian_width: bool = False,
    zero_width_joiner: bool = True,
) -> str:
    """Left-align text by padding with spaces on the right up to ``width`` columns."""
    count = width - string_width(text, east_asian_width, zero_width_joiner)
    if count > 0:
        return text + " " * count
    return text
