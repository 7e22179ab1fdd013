#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_marks.py
"""Unit tests for inline mark rendering.

Tests cover:
- Token pairs for every supported mark
- Marks that contribute nothing (missing attributes, unknown kinds)
- Nesting order of combined marks
- Identity and wrapping properties (Hypothesis)

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adf2md.ast import CodeMark, Em, Link, Strike, Strong, SubSup, TextColor, Underline, UnsupportedMark
from adf2md.renderers.marks import apply_marks, mark_tokens

SIMPLE_MARKS = st.sampled_from([Strong(), Em(), CodeMark(), Strike(), Underline()])


@pytest.mark.unit
class TestMarkTokens:
    """Tests for the token pair of each mark."""

    @pytest.mark.parametrize(
        "mark,expected",
        [
            (Strong(), ("**", "**")),
            (Em(), ("*", "*")),
            (CodeMark(), ("`", "`")),
            (Strike(), ("~~", "~~")),
            (Underline(), ("<u>", "</u>")),
            (SubSup(type="sub"), ("<sub>", "</sub>")),
            (SubSup(type="sup"), ("<sup>", "</sup>")),
            (Link(href="https://x.io"), ("[", "](https://x.io)")),
            (TextColor(color="#ff0000"), ('<span style="color: #ff0000">', "</span>")),
        ],
    )
    def test_supported_marks(self, mark, expected):
        """Test that each supported mark yields its opening and closing token."""
        assert mark_tokens(mark) == expected

    @pytest.mark.parametrize(
        "mark",
        [
            Link(),
            TextColor(),
            SubSup(),
            SubSup(type="middle"),
            UnsupportedMark(kind="border"),
            UnsupportedMark(kind="annotation"),
        ],
    )
    def test_marks_without_output(self, mark):
        """Test that incomplete and unknown marks contribute nothing."""
        assert mark_tokens(mark) is None


@pytest.mark.unit
class TestApplyMarks:
    """Tests for wrapping text in its marks."""

    def test_no_marks(self):
        """Test that text without marks is returned unchanged."""
        assert apply_marks("plain") == "plain"
        assert apply_marks("plain", []) == "plain"

    def test_strong_then_em(self):
        """Test that strong followed by em nests as bold-italic."""
        assert apply_marks("wow", [Strong(), Em()]) == "***wow***"

    def test_first_mark_is_outermost(self):
        """Test that the first mark wraps all later marks."""
        result = apply_marks("x", [Strike(), Underline(), CodeMark()])
        assert result == "~~<u>`x`</u>~~"

    def test_link_wrapping_code(self):
        """Test a code span inside a link."""
        result = apply_marks("docs", [Link(href="https://example.com"), CodeMark()])
        assert result == "[`docs`](https://example.com)"

    def test_code_wrapping_link(self):
        """Test a link inside a code span when the code mark comes first."""
        result = apply_marks("docs", [CodeMark(), Link(href="https://example.com")])
        assert result == "`[docs](https://example.com)`"

    def test_unknown_mark_is_skipped(self):
        """Test that unknown marks do not disturb the others."""
        result = apply_marks("x", [Strong(), UnsupportedMark(kind="border"), Em()])
        assert result == "***x***"

    def test_link_without_href_is_plain(self):
        """Test that a link mark without an href leaves the text plain."""
        assert apply_marks("x", [Link(href=None)]) == "x"

    def test_text_is_not_escaped(self):
        """Test that Markdown-significant characters pass through untouched."""
        assert apply_marks("a*b_c", [Strong()]) == "**a*b_c**"

    def test_subsup_and_color(self):
        """Test HTML-style marks combined."""
        result = apply_marks("2", [TextColor(color="red"), SubSup(type="sup")])
        assert result == '<span style="color: red"><sup>2</sup></span>'


@pytest.mark.unit
class TestApplyMarksProperties:
    """Property-based tests for apply_marks."""

    @given(text=st.text())
    def test_empty_marks_is_identity(self, text):
        """Text without marks is returned unchanged."""
        assert apply_marks(text, []) == text

    @given(text=st.text(), mark=SIMPLE_MARKS)
    def test_single_mark_wraps(self, text, mark):
        """A single mark places its tokens on both sides of the text."""
        opening, closing = mark_tokens(mark)
        assert apply_marks(text, [mark]) == f"{opening}{text}{closing}"

    @given(text=st.text(), marks=st.lists(SIMPLE_MARKS, max_size=6))
    def test_nesting_is_symmetric(self, text, marks):
        """Adding a mark outside a marked text wraps the previous result."""
        inner = apply_marks(text, marks)
        outer = apply_marks(text, [Strong(), *marks])
        assert outer == f"**{inner}**"
