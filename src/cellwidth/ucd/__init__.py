"""Offline tooling that regenerates the bundled width tables."""

from .build import Tables, build_tables, classify, render_module, write_module
from .schema import UcdRange, parse_ranges
from .sync import UCD_FILES, fetch_ucd, fetch_ucd_file


def generate(version: str = "latest", **fetch_options) -> Tables:
    """Download UCD files for ``version`` and build the width tables."""
    return build_tables(fetch_ucd(version, **fetch_options))


__all__ = [
    "generate",
    # Build
    "Tables",
    "build_tables",
    "classify",
    "render_module",
    "write_module",
    # Schema
    "UcdRange",
    "parse_ranges",
    # Sync
    "UCD_FILES",
    "fetch_ucd",
    "fetch_ucd_file",
]
