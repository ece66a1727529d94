"""Tests for locale detection."""

import pytest

from cellwidth.eastasian import current_locale, is_east_asian, is_east_asian_locale


class TestIsEastAsianLocale:
    @pytest.mark.parametrize(
        "locale_name",
        [
            "ja_JP.UTF-8",
            "ja_JP.utf8",
            "ko_KR.UTF-8",
            "zh_CN.UTF-8",
            "zh_TW.utf8",
            "ja_JP.eucJP",
            "ja_JP.SJIS",
            "zh_CN.GB2312",
            "zh_TW.Big5",
            "ko_KR.eucKR",
            "zh_CN.gbk@stroke",
        ],
    )
    def test_east_asian(self, locale_name):
        assert is_east_asian_locale(locale_name) is True

    @pytest.mark.parametrize(
        "locale_name",
        [
            "",
            "C",
            "POSIX",
            "C.UTF-8",
            "en_US.UTF-8",
            "de_DE.utf8",
            "en_US.ISO-8859-1",
            "ja_JP",
            "ja",
            "ja_JP.UTF-8@cjk_narrow",
        ],
    )
    def test_not_east_asian(self, locale_name):
        assert is_east_asian_locale(locale_name) is False


class TestCurrentLocale:
    def test_precedence(self):
        env = {"LC_ALL": "ja_JP.UTF-8", "LC_CTYPE": "en_US.UTF-8", "LANG": "C"}
        assert current_locale(env) == "ja_JP.UTF-8"

    def test_skips_empty(self):
        env = {"LC_ALL": "", "LC_CTYPE": "", "LANG": "ko_KR.UTF-8"}
        assert current_locale(env) == "ko_KR.UTF-8"

    def test_unset(self):
        assert current_locale({}) == ""

    def test_process_environment(self, monkeypatch):
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.setenv("LC_CTYPE", "zh_CN.UTF-8")
        assert current_locale() == "zh_CN.UTF-8"


class TestIsEastAsian:
    def test_explicit_locale(self):
        assert is_east_asian("ja_JP.UTF-8") is True
        assert is_east_asian("en_GB.UTF-8") is False

    def test_from_environ(self):
        assert is_east_asian(environ={"LANG": "ja_JP.UTF-8"}) is True
        assert is_east_asian(environ={}) is False
