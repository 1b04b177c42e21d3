"""Tests for string helpers (core/text.py)."""

from __future__ import annotations

import pytest

from sample_helper.core.text import exception_to_html, trim_length, trim_start


class TestTrimLength:
    def test_short_text_unchanged(self) -> None:
        assert trim_length("abc", 5) == "abc"

    def test_exact_length_unchanged(self) -> None:
        assert trim_length("abcde", 5) == "abcde"

    def test_long_text_gets_ellipsis(self) -> None:
        assert trim_length("abcdefgh", 6) == "abc..."

    def test_minimum_length(self) -> None:
        assert trim_length("abcdef", 3) == "..."

    def test_too_small_max_length_raises(self) -> None:
        with pytest.raises(ValueError, match="at least 3"):
            trim_length("abc", 2)


class TestTrimStart:
    def test_removes_word_repeatedly(self) -> None:
        assert trim_start("re:re:Subject", "re:") == "Subject"

    def test_case_is_ignored(self) -> None:
        assert trim_start("RE: Fw: hello", "re: ", "fw: ") == "hello"

    def test_words_applied_in_order(self) -> None:
        # "fw:" is only checked after every leading "re:" is gone
        assert trim_start("fw:re:x", "re:", "fw:") == "re:x"

    def test_no_match(self) -> None:
        assert trim_start("hello", "xyz") == "hello"

    def test_empty_word_ignored(self) -> None:
        assert trim_start("hello", "") == "hello"

    def test_length_changing_case_fold_leaves_text_alone(self) -> None:
        # "ß" folds to "ss", so the folded text is longer than the original
        assert trim_start("straße-x", "STRASSE") == "straße-x"

    def test_text_shorter_than_word(self) -> None:
        assert trim_start("re", "re:") == "re"


class TestExceptionToHtml:
    def _raise(self) -> ValueError:
        try:
            raise ValueError("bad <value>")
        except ValueError as exc:
            return exc

    def test_wrapped_in_red_font(self) -> None:
        result = exception_to_html(self._raise())
        assert result.startswith('<font color="red">')
        assert result.endswith("</font>")

    def test_contains_message_escaped(self) -> None:
        result = exception_to_html(self._raise())
        assert "ValueError: bad &lt;value&gt;" in result

    def test_line_breaks_and_spaces(self) -> None:
        result = exception_to_html(self._raise())
        assert "\n<br/>" in result
        assert " &nbsp;" in result
        assert "  " not in result.replace(" &nbsp;", "")

    def test_exception_without_traceback(self) -> None:
        result = exception_to_html(RuntimeError("plain"))
        assert result == '<font color="red">RuntimeError: plain</font>'
