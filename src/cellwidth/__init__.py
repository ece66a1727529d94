"""
cellwidth - terminal display width of Unicode text.

Measures how many fixed-width cells text occupies, accounting for wide
(East Asian, emoji), zero-width (combining, control) and joined
(ZWJ emoji sequence) characters, and lays text out within a column budget.

Example:
    from cellwidth import Condition, string_width, truncate, fill_right

    string_width("世界")                  # 4
    truncate("あいうえお", 7, "...")       # "あい..."
    fill_right("abc", 5)                  # "abc  "

    cjk = Condition(east_asian_width=True)
    cjk.rune_width("☆")                  # 2
"""

__version__ = "0.1.0"

# Convenience functions (process-wide default condition)
from .api import (
    fill_left,
    fill_right,
    rune_width,
    string_width,
    truncate,
    wrap,
)

# Conditions
from .condition import (
    EASTASIAN_ENV,
    Condition,
    get_default_condition,
    reload_default_condition,
    set_default_condition,
)

# Locale detection
from .eastasian import is_east_asian

# Segmentation
from .segment import Cluster, iter_clusters

# Tables
from .table import (
    AMBIGUOUS_TABLE,
    DEFAULT_TABLE,
    UNICODE_VERSION,
    Interval,
    TableError,
    WidthTable,
    compact_intervals,
    validate_table,
)

__all__ = [
    # Version
    "__version__",
    # Functions
    "rune_width",
    "string_width",
    "truncate",
    "wrap",
    "fill_left",
    "fill_right",
    # Conditions
    "Condition",
    "EASTASIAN_ENV",
    "get_default_condition",
    "reload_default_condition",
    "set_default_condition",
    "is_east_asian",
    # Segmentation
    "Cluster",
    "iter_clusters",
    # Tables
    "AMBIGUOUS_TABLE",
    "DEFAULT_TABLE",
    "UNICODE_VERSION",
    "Interval",
    "TableError",
    "WidthTable",
    "compact_intervals",
    "validate_table",
]
