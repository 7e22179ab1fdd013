#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the to_ast and to_markdown entry points."""

import json
import logging

import pytest

import adf2md
from adf2md import AdfParserOptions, MarkdownRendererOptions, to_ast, to_markdown
from adf2md.ast import Document, Heading, Text
from adf2md.exceptions import InvalidRootError, ParsingError


@pytest.mark.unit
class TestToAst:
    """Tests for to_ast."""

    def test_returns_document(self, adf_doc, adf_paragraph):
        """Test that a decoded tree is parsed into a Document."""
        doc = to_ast(adf_doc(adf_paragraph("hi")))
        assert isinstance(doc, Document)
        assert doc.content[0].content == [Text(text="hi")]

    def test_passes_options(self, adf_doc):
        """Test that parser options are honoured."""
        doc = to_ast(adf_doc(version=3), AdfParserOptions(validate_version=False))
        assert doc.version == 3

    def test_debug_timing_logged(self, adf_doc, caplog):
        """Test that parse timing is logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="adf2md"):
            to_ast(adf_doc())
        assert "Parsing (adf) completed in" in caplog.text


@pytest.mark.unit
class TestToMarkdown:
    """Tests for to_markdown."""

    def test_heading(self, adf_doc):
        """Test a level 2 heading."""
        adf = adf_doc({"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Hi"}]})
        assert to_markdown(adf) == "## Hi"

    def test_strong_em(self, adf_doc, adf_paragraph, adf_text):
        """Test bold-italic text."""
        assert to_markdown(adf_doc(adf_paragraph(adf_text("wow", "strong", "em")))) == "***wow***"

    def test_json_text_input(self, adf_doc, adf_paragraph):
        """Test that JSON text is accepted."""
        assert to_markdown(json.dumps(adf_doc(adf_paragraph("a")))) == "a"

    def test_document_input(self):
        """Test that an already parsed Document is rendered directly."""
        doc = Document(content=[Heading(level=1, content=[Text(text="T")])])
        assert to_markdown(doc) == "# T"

    def test_renderer_options(self, adf_doc):
        """Test that renderer options are honoured."""
        adf = adf_doc({"type": "paragraph", "content": [{"type": "date", "attrs": {"timestamp": 1582152559000}}]})
        options = MarkdownRendererOptions(date_format_mode="strftime", date_strftime_pattern="%b %d %Y")
        assert to_markdown(adf, renderer_options=options) == "Feb 19 2020"

    def test_invalid_root(self):
        """Test that an invalid root raises and produces no output."""
        with pytest.raises(InvalidRootError):
            to_markdown({"type": "paragraph", "content": []})

    def test_invalid_json(self):
        """Test that malformed JSON text raises ParsingError."""
        with pytest.raises(ParsingError):
            to_markdown("not json")

    def test_unsupported_nodes_do_not_raise(self, adf_doc, adf_paragraph, caplog):
        """Test that unknown node types are dropped with a warning."""
        adf = adf_doc(adf_paragraph("a"), {"type": "futureBlock"}, adf_paragraph("b"))
        with caplog.at_level(logging.WARNING, logger="adf2md"):
            assert to_markdown(adf) == "a\n\nb"
        assert "Unsupported node type: futureBlock" in caplog.text


@pytest.mark.unit
def test_public_exports():
    """Test the names exported at package level."""
    for name in adf2md.__all__:
        assert hasattr(adf2md, name)
    assert adf2md.__version__


@pytest.mark.unit
def test_failed_parse_timing_logged(caplog):
    """Test that a failing stage is logged as failed before the error propagates."""
    with caplog.at_level(logging.DEBUG, logger="adf2md"):
        with pytest.raises(InvalidRootError):
            to_ast({"type": "table"})
    assert "Parsing (adf) failed after" in caplog.text


@pytest.mark.unit
def test_deep_document_renders_within_nesting_limit(caplog):
    """Test that a very deep tree converts once the parser has bounded its depth."""
    node = {"type": "paragraph", "content": [{"type": "text", "text": "deep"}]}
    for _ in range(3000):
        node = {"type": "blockquote", "content": [node]}

    with caplog.at_level(logging.WARNING, logger="adf2md"):
        result = to_markdown({"type": "doc", "version": 1, "content": [node]})

    assert result.startswith("> > >")
    assert "deep" not in result
    assert "nested deeper than 100 levels" in caplog.text
