"""Tests for leaderboard.env_parse.

Covers:
- parse_bool: truthy/falsey matrix, unknown values (strict + non-strict), unset.
- parse_int: valid ints, invalid strings, minimum bound, unset, empty.
- parse_enum: valid values, casefold, unknown (strict + non-strict), unset.
"""

from __future__ import annotations

import logging

import pytest

from leaderboard.env_parse import ConfigError, parse_bool, parse_enum, parse_int

# ---------------------------------------------------------------------------
# parse_bool
# ---------------------------------------------------------------------------


class TestParseBool:
    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "On", " 1 "])
    def test_truthy_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("TEST_BOOL", raw)
        assert parse_bool("TEST_BOOL") is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "OFF", "", "   "])
    def test_falsey_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("TEST_BOOL", raw)
        assert parse_bool("TEST_BOOL", default=True) is False

    def test_unset_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TEST_BOOL", raising=False)
        assert parse_bool("TEST_BOOL") is False
        assert parse_bool("TEST_BOOL", default=True) is True

    def test_strict_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_BOOL", "maybe")
        with pytest.raises(ConfigError, match="must be one of 1/0"):
            parse_bool("TEST_BOOL")

    def test_nonstrict_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TEST_BOOL", "garbage")
        with caplog.at_level(logging.WARNING):
            assert parse_bool("TEST_BOOL", default=True, strict=False) is True
        assert "not an on/off value" in caplog.text


# ---------------------------------------------------------------------------
# parse_int
# ---------------------------------------------------------------------------


class TestParseInt:
    def test_valid_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", " 42 ")
        assert parse_int("TEST_INT", 0) == 42

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_unset_or_empty(self, monkeypatch: pytest.MonkeyPatch, raw: str | None) -> None:
        if raw is None:
            monkeypatch.delenv("TEST_INT", raising=False)
        else:
            monkeypatch.setenv("TEST_INT", raw)
        assert parse_int("TEST_INT", 50) == 50

    def test_invalid_strict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", "fifty")
        with pytest.raises(ConfigError, match="must be a whole number"):
            parse_int("TEST_INT", 50)

    def test_invalid_nonstrict(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TEST_INT", "fifty")
        with caplog.at_level(logging.WARNING):
            assert parse_int("TEST_INT", 50, strict=False) == 50
        assert "TEST_INT='fifty'" in caplog.text

    def test_below_minimum_strict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", "0")
        with pytest.raises(ConfigError, match="must be at least 1"):
            parse_int("TEST_INT", 50, min_value=1)

    def test_below_minimum_clamped(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TEST_INT", "-3")
        with caplog.at_level(logging.WARNING):
            assert parse_int("TEST_INT", 50, min_value=1, strict=False) == 1
        assert "to its floor 1" in caplog.text


# ---------------------------------------------------------------------------
# parse_enum
# ---------------------------------------------------------------------------


class TestParseEnum:
    ALLOWED = {"heap", "quickselect", "online"}

    def test_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_ENUM", "heap")
        assert parse_enum("TEST_ENUM", self.ALLOWED, "online") == "heap"

    def test_casefold(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_ENUM", " QuickSelect ")
        assert parse_enum("TEST_ENUM", self.ALLOWED, "online") == "quickselect"

    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TEST_ENUM", raising=False)
        assert parse_enum("TEST_ENUM", self.ALLOWED, "online") == "online"

    def test_unknown_strict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_ENUM", "bogosort")
        with pytest.raises(ConfigError, match="must be one of: heap, online, quickselect"):
            parse_enum("TEST_ENUM", self.ALLOWED, "online")

    def test_unknown_nonstrict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_ENUM", "bogosort")
        assert parse_enum("TEST_ENUM", self.ALLOWED, "online", strict=False) == "online"
