"""Measurement conditions and the process-wide default."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from . import layout, measure
from .eastasian import is_east_asian
from .resolver import rune_width

logger = logging.getLogger(__name__)

EASTASIAN_ENV = "CELLWIDTH_EASTASIAN"


def east_asian_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Resolve East Asian mode from the environment.

    ``CELLWIDTH_EASTASIAN=1`` turns it on, any other non-empty value turns it
    off. When unset or empty the locale decides.
    """
    env = os.environ if environ is None else environ
    value = env.get(EASTASIAN_ENV, "")
    if value == "":
        return is_east_asian(environ=env)
    return value == "1"


@dataclass(frozen=True)
class Condition:
    """Flags controlling how widths are measured.

    Attributes:
        east_asian_width: Render East Asian ambiguous characters two cells wide.
        zero_width_joiner: Measure grapheme clusters (so ZWJ emoji sequences
            count once) instead of single codepoints.

    Example:
        cjk = Condition(east_asian_width=True)
        cjk.string_width("☆")  # 2
    """

    east_asian_width: bool = False
    zero_width_joiner: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Condition":
        """Create a condition for the current environment and locale."""
        return cls(east_asian_width=east_asian_from_env(environ))

    def replace(self, **changes) -> "Condition":
        """Return a copy with some flags changed."""
        return dataclasses.replace(self, **changes)

    def rune_width(self, char: str | int) -> int:
        return rune_width(char, self.east_asian_width)

    def string_width(self, text: str) -> int:
        return measure.string_width(text, self.east_asian_width, self.zero_width_joiner)

    def truncate(self, text: str, max_width: int, tail: str = "") -> str:
        return layout.truncate(
            text, max_width, tail, self.east_asian_width, self.zero_width_joiner
        )

    def wrap(self, text: str, width: int) -> str:
        return layout.wrap(text, width, self.east_asian_width, self.zero_width_joiner)

    def fill_left(self, text: str, width: int) -> str:
        return layout.fill_left(text, width, self.east_asian_width, self.zero_width_joiner)

    def fill_right(self, text: str, width: int) -> str:
        return layout.fill_right(text, width, self.east_asian_width, self.zero_width_joiner)


# Module-level singleton
_default: Condition | None = None


def get_default_condition() -> Condition:
    """Get or create the process-wide default condition."""
    global _default
    if _default is None:
        _default = Condition.from_env()
        logger.debug(f"Default condition: {_default}")
    return _default


def reload_default_condition(environ: Mapping[str, str] | None = None) -> Condition:
    """Re-read the environment and replace the default condition."""
    global _default
    _default = Condition.from_env(environ)
    logger.debug(f"Reloaded default condition: {_default}")
    return _default


def set_default_condition(condition: Condition) -> Condition:
    """Install ``condition`` as the default and return the previous one."""
    global _default
    previous = get_default_condition()
    _default = condition
    return previous
