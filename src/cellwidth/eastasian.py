"""Detect whether the current locale is East Asian (CJK)."""

from __future__ import annotations

import logging
import os
import re
from typing import Mapping

logger = logging.getLogger(__name__)

LOCALE_VARIABLES = ("LC_ALL", "LC_CTYPE", "LANG")

# Maximum bytes per character for the charsets we recognise
_MBLEN = {
    "utf-8": 6,
    "utf8": 6,
    "jis": 8,
    "eucjp": 3,
    "euckr": 2,
    "euccn": 2,
    "sjis": 2,
    "cp932": 2,
    "cp51932": 2,
    "cp936": 2,
    "cp949": 2,
    "cp950": 2,
    "big5": 2,
    "gbk": 2,
    "gb2312": 2,
}

_LOCALE_RE = re.compile(r"^[a-z][a-z][a-z]?(?:_[A-Z][A-Z])?\.(.+)")

_CJK_LANGUAGES = ("ja", "ko", "zh")


def current_locale(environ: Mapping[str, str] | None = None) -> str:
    """Return the first non-empty of LC_ALL, LC_CTYPE and LANG."""
    env = os.environ if environ is None else environ
    for name in LOCALE_VARIABLES:
        value = env.get(name, "")
        if value:
            return value
    return ""


def is_east_asian_locale(locale_name: str) -> bool:
    """Check whether a locale name such as ``ja_JP.UTF-8`` is East Asian.

    Legacy multibyte charsets (EUC-JP, Shift_JIS, Big5, ...) always count.
    UTF-8 counts only for Japanese, Korean and Chinese locales. The
    ``@cjk_narrow`` modifier turns detection off.
    """
    if locale_name in ("", "C", "POSIX"):
        return False

    charset = locale_name.lower()
    m = _LOCALE_RE.match(locale_name)
    if m:
        charset = m.group(1).lower()

    if charset.endswith("@cjk_narrow"):
        return False
    charset = charset.split("@", 1)[0]
    if not charset:
        return False

    if _MBLEN.get(charset, 1) <= 1:
        return False
    if not charset.startswith("u"):
        return True
    return locale_name.startswith(_CJK_LANGUAGES)


def is_east_asian(locale_name: str | None = None, environ: Mapping[str, str] | None = None) -> bool:
    """Check whether the given (or current) locale is East Asian."""
    if locale_name is None:
        locale_name = current_locale(environ)
    result = is_east_asian_locale(locale_name)
    logger.debug(f"Locale {locale_name!r} east asian: {result}")
    return result
