#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/parsers/adf.py
"""ADF (Atlassian Document Format) to typed AST parser.

This module turns a raw ADF tree (the parsed JSON of a Jira description or
Confluence page body) into the typed nodes of :mod:`adf2md.ast.nodes`.

Parsing is permissive below the root: missing or malformed attributes fall
back to their documented defaults, children that are not JSON objects are
skipped, and unknown node types become :class:`UnsupportedNode`
placeholders so that the renderer can report them. Only an invalid root
raises.

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional, Union

from adf2md.ast.nodes import (
    BlockCard,
    BlockQuote,
    BulletList,
    CodeBlock,
    CodeMark,
    Date,
    DecisionItem,
    DecisionList,
    Document,
    Em,
    Emoji,
    Expand,
    HardBreak,
    Heading,
    InlineCard,
    Link,
    ListItem,
    Mark,
    Media,
    MediaGroup,
    MediaSingle,
    Mention,
    Node,
    OrderedList,
    Panel,
    Paragraph,
    Rule,
    Status,
    Strike,
    Strong,
    SubSup,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
    TextColor,
    Underline,
    UnsupportedMark,
    UnsupportedNode,
)
from adf2md.constants import (
    ADF_ROOT_TYPE,
    DEFAULT_DECISION_STATE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_ORDERED_LIST_START,
    DEFAULT_PANEL_TYPE,
    DEFAULT_STATUS_COLOR,
    DEFAULT_TASK_STATE,
    SUPPORTED_ADF_VERSIONS,
)
from adf2md.exceptions import InvalidRootError, ParsingError
from adf2md.options.adf import AdfParserOptions
from adf2md.parsers.base import BaseParser

logger = logging.getLogger(__name__)

AdfInput = Union[Mapping[str, Any], str, bytes]


def _coerce_int(value: Any, default: Optional[int]) -> Optional[int]:
    """Read an integer attribute, accepting numeric strings.

    Booleans, fractional floats and non-numeric strings yield ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _coerce_str(value: Any, default: Optional[str] = None) -> Optional[str]:
    """Read a string attribute; numbers are stringified, empty strings are missing."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return default


def _attrs(data: Mapping[str, Any]) -> Mapping[str, Any]:
    attrs = data.get("attrs")
    return attrs if isinstance(attrs, Mapping) else {}


def _parse_mark(data: Mapping[str, Any]) -> Mark:
    """Convert one raw mark into its typed counterpart."""
    kind = data.get("type")
    attrs = _attrs(data)

    if kind == "strong":
        return Strong()
    elif kind == "em":
        return Em()
    elif kind == "code":
        return CodeMark()
    elif kind == "strike":
        return Strike()
    elif kind == "underline":
        return Underline()
    elif kind == "link":
        return Link(href=_coerce_str(attrs.get("href")))
    elif kind == "subsup":
        return SubSup(type=_coerce_str(attrs.get("type")))
    elif kind == "textColor":
        return TextColor(color=_coerce_str(attrs.get("color")))

    return UnsupportedMark(kind=kind if isinstance(kind, str) else "")


def _parse_marks(raw: Any) -> list[Mark]:
    if not isinstance(raw, list):
        return []
    return [_parse_mark(mark) for mark in raw if isinstance(mark, Mapping)]


class AdfParser(BaseParser):
    """Convert ADF trees to typed Document objects.

    Parameters
    ----------
    options : AdfParserOptions or None
        Parser options

    Examples
    --------
    Parse an already-decoded ADF tree:
        >>> parser = AdfParser()
        >>> doc = parser.parse({"type": "doc", "version": 1, "content": []})

    Parse ADF JSON text:
        >>> doc = parser.parse('{"type": "doc", "version": 1, "content": []}')

    """

    def __init__(self, options: AdfParserOptions | None = None):
        """Initialize the ADF parser."""
        BaseParser._validate_options_type(options, AdfParserOptions, "adf")
        options = options or AdfParserOptions()
        super().__init__(options)
        self.options: AdfParserOptions = options

    def parse(self, input_data: Any) -> Document:
        """Parse an ADF document into a typed Document.

        Parameters
        ----------
        input_data : Mapping, str, or bytes
            Decoded ADF tree, or ADF JSON text (bytes must be UTF-8)

        Returns
        -------
        Document
            Typed AST document

        Raises
        ------
        ParsingError
            If JSON text cannot be decoded
        InvalidRootError
            If the root is not a ``doc`` object, or its version is rejected

        """
        data = self._load(input_data)
        version = self._validate_root(data)

        return Document(content=self._parse_children(data.get("content"), depth=1), version=version)

    @staticmethod
    def _load(input_data: Any) -> Any:
        """Decode JSON text; any other value is returned for root validation."""
        if isinstance(input_data, bytes):
            try:
                input_data = input_data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError(
                    f"ADF input is not valid UTF-8: {e}", parsing_stage="json_parsing", original_error=e
                ) from e

        if isinstance(input_data, str):
            try:
                return json.loads(input_data)
            except json.JSONDecodeError as e:
                raise ParsingError(
                    f"Invalid JSON in ADF input: {e}", parsing_stage="json_parsing", original_error=e
                ) from e
            except RecursionError as e:
                raise ParsingError(
                    "ADF input is nested too deeply to decode", parsing_stage="json_parsing", original_error=e
                ) from e

        return input_data

    def _validate_root(self, data: Any) -> int:
        """Check the root node and return the document version to record.

        Raises
        ------
        InvalidRootError
            If the root is not a ``doc`` mapping, or (when validating) its
            version is missing, not an integer, or unsupported

        """
        if not isinstance(data, Mapping):
            raise InvalidRootError(
                f"ADF root must be a JSON object, got {type(data).__name__}",
                root_type=None,
            )

        root_type = data.get("type")
        if root_type != ADF_ROOT_TYPE:
            raise InvalidRootError(root_type=root_type)

        version = data.get("version")
        is_int = isinstance(version, int) and not isinstance(version, bool)

        if self.options.validate_version:
            if not is_int:
                raise InvalidRootError(
                    f"ADF document version must be an integer, got {version!r}",
                    root_type=root_type,
                )
            if version not in SUPPORTED_ADF_VERSIONS:
                raise InvalidRootError(
                    f"Unsupported ADF version: {version}. Supported versions: {sorted(SUPPORTED_ADF_VERSIONS)}",
                    root_type=root_type,
                )
        elif not is_int or version not in SUPPORTED_ADF_VERSIONS:
            logger.warning(f"ADF version {version!r} is not supported. Attempting to parse anyway.")

        return version if is_int else 1

    def _parse_children(self, raw: Any, depth: int) -> list[Node]:
        """Parse a ``content`` array, skipping entries that are not objects."""
        if not isinstance(raw, list):
            if raw is not None:
                logger.debug(f"Ignoring non-list content of type {type(raw).__name__}")
            return []

        nodes: list[Node] = []
        for child in raw:
            if not isinstance(child, Mapping):
                logger.debug(f"Skipping non-object child of type {type(child).__name__}")
                continue
            node = self._parse_node(child, depth)
            if node is not None:
                nodes.append(node)
        return nodes

    def _parse_node(self, data: Mapping[str, Any], depth: int) -> Node | None:
        """Dispatch one raw node to its builder.

        Returns None when the node lies beyond ``max_nesting_depth``.
        """
        kind = data.get("type")

        if depth > self.options.max_nesting_depth:
            logger.warning(
                f"Dropping '{kind}' node nested deeper than {self.options.max_nesting_depth} levels"
            )
            return None

        builder = self._BUILDERS.get(kind) if isinstance(kind, str) else None
        if builder is None:
            return UnsupportedNode(kind=kind if isinstance(kind, str) else "")

        return builder(self, data, depth)

    # Block node builders

    def _build_paragraph(self, data: Mapping[str, Any], depth: int) -> Paragraph:
        return Paragraph(content=self._parse_children(data.get("content"), depth + 1))

    def _build_heading(self, data: Mapping[str, Any], depth: int) -> Heading:
        level = _coerce_int(_attrs(data).get("level"), DEFAULT_HEADING_LEVEL)
        return Heading(
            level=level if level is not None and level >= 1 else DEFAULT_HEADING_LEVEL,
            content=self._parse_children(data.get("content"), depth + 1),
        )

    def _build_bullet_list(self, data: Mapping[str, Any], depth: int) -> BulletList:
        return BulletList(content=self._parse_children(data.get("content"), depth + 1))

    def _build_ordered_list(self, data: Mapping[str, Any], depth: int) -> OrderedList:
        order = _coerce_int(_attrs(data).get("order"), DEFAULT_ORDERED_LIST_START)
        return OrderedList(
            order=order if order is not None and order >= 0 else DEFAULT_ORDERED_LIST_START,
            content=self._parse_children(data.get("content"), depth + 1),
        )

    def _build_list_item(self, data: Mapping[str, Any], depth: int) -> ListItem:
        return ListItem(content=self._parse_children(data.get("content"), depth + 1))

    def _build_task_list(self, data: Mapping[str, Any], depth: int) -> TaskList:
        return TaskList(content=self._parse_children(data.get("content"), depth + 1))

    def _build_task_item(self, data: Mapping[str, Any], depth: int) -> TaskItem:
        return TaskItem(
            state=_coerce_str(_attrs(data).get("state"), DEFAULT_TASK_STATE) or DEFAULT_TASK_STATE,
            content=self._parse_children(data.get("content"), depth + 1),
        )

    def _build_code_block(self, data: Mapping[str, Any], depth: int) -> CodeBlock:
        code = ""
        content = data.get("content")
        if isinstance(content, list) and content and isinstance(content[0], Mapping):
            first_text = content[0].get("text")
            code = first_text if isinstance(first_text, str) else ""
        return CodeBlock(code=code, language=_coerce_str(_attrs(data).get("language"), "") or "")

    def _build_block_quote(self, data: Mapping[str, Any], depth: int) -> BlockQuote:
        return BlockQuote(content=self._parse_children(data.get("content"), depth + 1))

    def _build_rule(self, data: Mapping[str, Any], depth: int) -> Rule:
        return Rule()

    def _build_table(self, data: Mapping[str, Any], depth: int) -> Table:
        return Table(content=self._parse_children(data.get("content"), depth + 1))

    def _build_table_row(self, data: Mapping[str, Any], depth: int) -> TableRow:
        return TableRow(content=self._parse_children(data.get("content"), depth + 1))

    def _build_table_cell(self, data: Mapping[str, Any], depth: int) -> TableCell:
        return TableCell(
            content=self._parse_children(data.get("content"), depth + 1),
            header=data.get("type") == "tableHeader",
        )

    def _build_panel(self, data: Mapping[str, Any], depth: int) -> Panel:
        return Panel(
            panel_type=_coerce_str(_attrs(data).get("panelType"), DEFAULT_PANEL_TYPE) or DEFAULT_PANEL_TYPE,
            content=self._parse_children(data.get("content"), depth + 1),
        )

    def _build_media_single(self, data: Mapping[str, Any], depth: int) -> MediaSingle:
        return MediaSingle(content=self._parse_children(data.get("content"), depth + 1))

    def _build_media_group(self, data: Mapping[str, Any], depth: int) -> MediaGroup:
        return MediaGroup(content=self._parse_children(data.get("content"), depth + 1))

    def _build_media(self, data: Mapping[str, Any], depth: int) -> Media:
        attrs = _attrs(data)
        return Media(id=_coerce_str(attrs.get("id")), alt=_coerce_str(attrs.get("alt")))

    def _build_expand(self, data: Mapping[str, Any], depth: int) -> Expand:
        return Expand(
            title=_coerce_str(_attrs(data).get("title")),
            content=self._parse_children(data.get("content"), depth + 1),
            nested=data.get("type") == "nestedExpand",
        )

    def _build_decision_list(self, data: Mapping[str, Any], depth: int) -> DecisionList:
        return DecisionList(content=self._parse_children(data.get("content"), depth + 1))

    def _build_decision_item(self, data: Mapping[str, Any], depth: int) -> DecisionItem:
        return DecisionItem(
            state=_coerce_str(_attrs(data).get("state"), DEFAULT_DECISION_STATE) or DEFAULT_DECISION_STATE,
            content=self._parse_children(data.get("content"), depth + 1),
        )

    def _build_block_card(self, data: Mapping[str, Any], depth: int) -> BlockCard:
        return BlockCard(url=_coerce_str(_attrs(data).get("url")))

    # Inline node builders

    def _build_text(self, data: Mapping[str, Any], depth: int) -> Text:
        text = data.get("text")
        return Text(text=text if isinstance(text, str) else "", marks=_parse_marks(data.get("marks")))

    def _build_hard_break(self, data: Mapping[str, Any], depth: int) -> HardBreak:
        return HardBreak()

    def _build_mention(self, data: Mapping[str, Any], depth: int) -> Mention:
        attrs = _attrs(data)
        return Mention(id=_coerce_str(attrs.get("id")), text=_coerce_str(attrs.get("text")))

    def _build_emoji(self, data: Mapping[str, Any], depth: int) -> Emoji:
        attrs = _attrs(data)
        return Emoji(short_name=_coerce_str(attrs.get("shortName")), text=_coerce_str(attrs.get("text")))

    def _build_date(self, data: Mapping[str, Any], depth: int) -> Date:
        return Date(timestamp=_coerce_int(_attrs(data).get("timestamp"), None))

    def _build_status(self, data: Mapping[str, Any], depth: int) -> Status:
        attrs = _attrs(data)
        return Status(
            text=_coerce_str(attrs.get("text"), "") or "",
            color=_coerce_str(attrs.get("color"), DEFAULT_STATUS_COLOR) or DEFAULT_STATUS_COLOR,
        )

    def _build_inline_card(self, data: Mapping[str, Any], depth: int) -> InlineCard:
        return InlineCard(url=_coerce_str(_attrs(data).get("url")))

    # Dispatch table mapping ADF type tags to builders
    _BUILDERS: dict[str, Callable[["AdfParser", Mapping[str, Any], int], Node]] = {
        "paragraph": _build_paragraph,
        "heading": _build_heading,
        "bulletList": _build_bullet_list,
        "orderedList": _build_ordered_list,
        "listItem": _build_list_item,
        "taskList": _build_task_list,
        "taskItem": _build_task_item,
        "codeBlock": _build_code_block,
        "blockquote": _build_block_quote,
        "rule": _build_rule,
        "table": _build_table,
        "tableRow": _build_table_row,
        "tableHeader": _build_table_cell,
        "tableCell": _build_table_cell,
        "panel": _build_panel,
        "mediaSingle": _build_media_single,
        "mediaGroup": _build_media_group,
        "media": _build_media,
        "expand": _build_expand,
        "nestedExpand": _build_expand,
        "decisionList": _build_decision_list,
        "decisionItem": _build_decision_item,
        "blockCard": _build_block_card,
        "text": _build_text,
        "hardBreak": _build_hard_break,
        "mention": _build_mention,
        "emoji": _build_emoji,
        "date": _build_date,
        "status": _build_status,
        "inlineCard": _build_inline_card,
    }


__all__ = ["AdfParser", "AdfInput"]
