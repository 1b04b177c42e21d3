"""Tests for string-to-type conversion (core/conversion.py)."""

from __future__ import annotations

import enum
from decimal import Decimal
from pathlib import Path

import pytest

from sample_helper.core.conversion import convert_value, to_bool
from sample_helper.exceptions import ValueConversionError


class _Color(enum.Enum):
    RED = "r"
    GREEN = "g"


class TestToBool:
    @pytest.mark.parametrize("word", ["true", "True", "YES", "on", "1", " y "])
    def test_true_words(self, word: str) -> None:
        assert to_bool(word) is True

    @pytest.mark.parametrize("word", ["false", "FALSE", "no", "off", "0"])
    def test_false_words(self, word: str) -> None:
        assert to_bool(word) is False

    def test_other_words_rejected(self) -> None:
        with pytest.raises(ValueConversionError):
            to_bool("maybe")


class TestConvertValue:
    def test_int(self) -> None:
        assert convert_value("5", int) == 5

    def test_float(self) -> None:
        assert convert_value("2.5", float) == 2.5

    def test_str_is_unchanged(self) -> None:
        assert convert_value(" spaced ", str) == " spaced "

    def test_path(self) -> None:
        assert convert_value("/tmp/out", Path) == Path("/tmp/out")

    def test_decimal(self) -> None:
        assert convert_value("1.10", Decimal) == Decimal("1.10")

    def test_enum_by_name(self) -> None:
        assert convert_value("green", _Color) is _Color.GREEN

    def test_enum_by_value(self) -> None:
        assert convert_value("r", _Color) is _Color.RED

    def test_bad_int_raises_with_type(self) -> None:
        with pytest.raises(ValueConversionError, match="'int'") as exc_info:
            convert_value("five", int)
        assert exc_info.value.target_type is int

    def test_bad_decimal_raises(self) -> None:
        with pytest.raises(ValueConversionError):
            convert_value("abc", Decimal)

    def test_bad_enum_lists_choices(self) -> None:
        with pytest.raises(ValueConversionError) as exc_info:
            convert_value("blue", _Color)
        assert exc_info.value.hint is not None
        assert "red" in exc_info.value.hint
