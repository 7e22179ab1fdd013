#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests converting complete ADF documents to Markdown."""

import json

import pytest

from adf2md import MarkdownRenderer, to_ast, to_markdown
from adf2md.constants import DEFAULT_PANEL_ICONS

EXPECTED_SAMPLE = "\n".join(
    [
        "## Release checklist",
        "",
        "Owner: @Ada due 2020-02-19 [IN PROGRESS]",
        "",
        "1. Tag the build",
        "2. Publish",
        "  - wheels",
        "  - sdist",
        "",
        "- [x] Changelog",
        "- [ ] Announce",
        "",
        "```bash",
        "make release",
        "```",
        "",
        f"> {DEFAULT_PANEL_ICONS['warning']} Do not skip **CI**",
        "",
        "| Step | Owner |",
        "| --- | --- |",
        "| Build | CI |",
        "",
        "---",
        "",
        "See [the runbook](https://example.com/runbook)",
    ]
)


@pytest.mark.integration
class TestFullDocuments:
    """End-to-end conversion of realistic documents."""

    def test_issue_description(self, sample_adf):
        """Test a Jira-style description covering most node types."""
        assert to_markdown(sample_adf) == EXPECTED_SAMPLE

    def test_json_round_trip_input(self, sample_adf):
        """Test that the same document as JSON bytes gives the same output."""
        assert to_markdown(json.dumps(sample_adf).encode("utf-8")) == EXPECTED_SAMPLE

    def test_conversion_is_deterministic(self, sample_adf):
        """Test that rendering the same AST twice gives identical output."""
        doc = to_ast(sample_adf)
        renderer = MarkdownRenderer()
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)
        assert renderer.warnings == []

    def test_unknown_nodes_mixed_in(self, sample_adf):
        """Test that unknown nodes anywhere leave the rest of the output intact."""
        sample_adf["content"].insert(1, {"type": "extension", "attrs": {"extensionKey": "toc"}})
        sample_adf["content"][2]["content"].append({"type": "placeholder", "attrs": {"text": "..."}})

        doc = to_ast(sample_adf)
        renderer = MarkdownRenderer()

        assert renderer.render_to_string(doc) == EXPECTED_SAMPLE
        assert renderer.warnings == [
            "Unsupported node type: extension",
            "Unsupported node type: placeholder",
        ]

    def test_confluence_page_with_expand_and_decisions(self, adf_doc, adf_paragraph):
        """Test a Confluence-style page body."""
        adf = adf_doc(
            {
                "type": "expand",
                "attrs": {"title": "Background"},
                "content": [
                    adf_paragraph("Context here."),
                    {
                        "type": "nestedExpand",
                        "attrs": {"title": "Even more"},
                        "content": [adf_paragraph("Deep")],
                    },
                ],
            },
            {
                "type": "decisionList",
                "content": [
                    {
                        "type": "decisionItem",
                        "attrs": {"state": "DECIDED"},
                        "content": [{"type": "text", "text": "Ship Friday"}],
                    }
                ],
            },
            {
                "type": "mediaSingle",
                "attrs": {"layout": "center"},
                "content": [{"type": "media", "attrs": {"id": "f00", "type": "file", "collection": "c"}}],
            },
        )

        expected = "\n".join(
            [
                "<details>",
                "<summary>Background</summary>",
                "",
                "Context here.",
                "",
                "<details>",
                "<summary>Even more</summary>",
                "",
                "Deep",
                "</details>",
                "</details>",
                "",
                "- ✓ Ship Friday",
                "",
                "![image](media://f00)",
            ]
        )
        assert to_markdown(adf) == expected
