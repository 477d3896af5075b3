"""Tests for text normalisation."""

from __future__ import annotations

import pytest

from lexdoc.domain.models.enums import NormalizationPolicy
from lexdoc.layout.normalizer import (
    clean_preformatted_line,
    normalize,
    split_preformatted,
    strip_markup,
)


class TestStripMarkup:
    def test_bold(self):
        assert strip_markup("one **two** three") == "one two three"

    def test_italic(self):
        assert strip_markup("an *important* clause") == "an important clause"

    def test_underline(self):
        assert strip_markup("the __Employer__ agrees") == "the Employer agrees"

    def test_underline_requires_inner_non_space(self):
        assert strip_markup("__ x__") == "__ x__"

    def test_multiple_spans(self):
        assert strip_markup("**A** and **B**") == "A and B"


class TestNormalizeFull:
    def test_markup_example(self):
        assert normalize("one **two** three") == "one two three"

    def test_control_characters_become_spaces(self):
        assert normalize("a\r\nb\tc") == "a b c"

    def test_non_ascii_dropped(self):
        assert normalize("café “quoted”") == "caf quoted"

    def test_whitespace_collapsed_and_trimmed(self):
        assert normalize("   lots    of   space  ") == "lots of space"

    def test_empty(self):
        assert normalize("") == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "one **two** three",
            "Line one\nLine two\n\n  indented",
            "__Party__ *shall* pay € 100",
            "plain",
        ],
    )
    def test_idempotent(self, raw):
        once = normalize(raw)
        assert normalize(once) == once

    def test_result_is_printable_single_spaced(self):
        result = normalize("x\n\n\ty  z w")
        assert "  " not in result
        assert all(0x20 <= ord(ch) <= 0x7E for ch in result)
        assert result == result.strip()


class TestNormalizeMarkupOnly:
    def test_keeps_newlines(self):
        result = normalize("**A**\nB", NormalizationPolicy.MARKUP_ONLY)
        assert result == "A\nB"

    def test_keeps_non_ascii(self):
        assert normalize("café", NormalizationPolicy.MARKUP_ONLY) == "café"


class TestPreformatted:
    def test_split_keeps_blank_lines(self):
        assert split_preformatted("A\n\nB") == ["A", "", "B"]

    def test_split_line_count(self):
        content = "EMPLOYER:\n\n____\nAcme\n\n\nEMPLOYEE:"
        assert len(split_preformatted(content)) == content.count("\n") + 1

    def test_split_crlf(self):
        assert split_preformatted("A\r\n\r\nB") == ["A", "", "B"]

    def test_split_crlf_keeps_line_count(self):
        content = "EMPLOYER:\r\n\r\n____\r\nAcme\r\n"
        assert len(split_preformatted(content)) == content.count("\n") + 1

    def test_split_keeps_interior_carriage_return(self):
        assert split_preformatted("A\rB\nC") == ["A\rB", "C"]

    def test_clean_line_keeps_leading_space(self):
        assert clean_preformatted_line("  Date: ____ é") == "  Date: ____ "

    def test_clean_line_keeps_markup(self):
        assert clean_preformatted_line("**By:**") == "**By:**"
