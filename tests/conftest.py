"""Pytest configuration and shared fixtures for the adf2md test suite.

This module provides shared fixtures and test configuration used across
the unit and integration tests.
"""

import os
from typing import Any, Callable

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


def _text(text: str, *marks: str) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "text", "text": text}
    if marks:
        node["marks"] = [{"type": mark} for mark in marks]
    return node


def _paragraph(*inline: Any) -> dict[str, Any]:
    return {"type": "paragraph", "content": [_text(item) if isinstance(item, str) else item for item in inline]}


def _doc(*blocks: dict[str, Any], version: Any = 1) -> dict[str, Any]:
    return {"type": "doc", "version": version, "content": list(blocks)}


@pytest.fixture
def adf_text() -> Callable[..., dict[str, Any]]:
    """Provide a builder for raw ADF text nodes.

    Returns
    -------
    callable
        ``adf_text("hi", "strong")`` builds a text node with the given marks.

    """
    return _text


@pytest.fixture
def adf_paragraph() -> Callable[..., dict[str, Any]]:
    """Provide a builder for raw ADF paragraphs; strings become text nodes."""
    return _paragraph


@pytest.fixture
def adf_doc() -> Callable[..., dict[str, Any]]:
    """Provide a builder wrapping raw ADF blocks in a version 1 ``doc`` root."""
    return _doc


@pytest.fixture
def sample_adf() -> dict[str, Any]:
    """Provide a Jira-style issue description touching most node types.

    Returns
    -------
    dict
        Decoded ADF document

    """
    return _doc(
        {"type": "heading", "attrs": {"level": 2}, "content": [_text("Release checklist")]},
        _paragraph(
            "Owner: ",
            {"type": "mention", "attrs": {"id": "5b10a2844c20165700ede21g", "text": "@Ada"}},
            " due ",
            {"type": "date", "attrs": {"timestamp": "1582152559000"}},
            " ",
            {"type": "status", "attrs": {"text": "IN PROGRESS", "color": "blue"}},
        ),
        {
            "type": "orderedList",
            "attrs": {"order": 1},
            "content": [
                {"type": "listItem", "content": [_paragraph("Tag the build")]},
                {
                    "type": "listItem",
                    "content": [
                        _paragraph("Publish"),
                        {
                            "type": "bulletList",
                            "content": [
                                {"type": "listItem", "content": [_paragraph("wheels")]},
                                {"type": "listItem", "content": [_paragraph("sdist")]},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            "type": "taskList",
            "attrs": {"localId": "t1"},
            "content": [
                {"type": "taskItem", "attrs": {"localId": "a", "state": "DONE"}, "content": [_text("Changelog")]},
                {"type": "taskItem", "attrs": {"localId": "b", "state": "TODO"}, "content": [_text("Announce")]},
            ],
        },
        {
            "type": "codeBlock",
            "attrs": {"language": "bash"},
            "content": [_text("make release")],
        },
        {
            "type": "panel",
            "attrs": {"panelType": "warning"},
            "content": [_paragraph("Do not skip ", _text("CI", "strong"))],
        },
        {
            "type": "table",
            "content": [
                {
                    "type": "tableRow",
                    "content": [
                        {"type": "tableHeader", "content": [_paragraph("Step")]},
                        {"type": "tableHeader", "content": [_paragraph("Owner")]},
                    ],
                },
                {
                    "type": "tableRow",
                    "content": [
                        {"type": "tableCell", "content": [_paragraph("Build")]},
                        {"type": "tableCell", "content": [_paragraph("CI")]},
                    ],
                },
            ],
        },
        {"type": "rule"},
        _paragraph(
            "See ",
            {
                "type": "text",
                "text": "the runbook",
                "marks": [{"type": "link", "attrs": {"href": "https://example.com/runbook"}}],
            },
        ),
    )
