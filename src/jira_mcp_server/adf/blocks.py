"""Block-level parser: splits markdown-like text into ADF blocks.

Supports headings (# .. ######), bullet items (- / * / •), ordered items
(1. 2. ...), fenced code blocks (```lang) and plain paragraphs. Anything else
falls through to a paragraph, so every input converts.
"""

from __future__ import annotations

import re
from typing import Any

from jira_mcp_server.adf.inline import format_inline
from jira_mcp_server.adf.nodes import (
    Block,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
)

FENCE = "```"

# Any whitespace, tabs included, may follow a heading or list marker
_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_BULLET_RE = re.compile(r"^[\-\*•]\s+(.+)$")
_ORDERED_RE = re.compile(r"^\d+\.\s+(.+)$")


def segment(text: str) -> Document:
    """Convert text into a Document in a single pass over its lines."""
    blocks: list[Block] = []
    in_code_block = False
    code_lines: list[str] = []
    code_language: str | None = None
    after_blank = False

    for line in _split_lines(text):
        stripped = line.strip()

        if stripped.startswith(FENCE):
            if in_code_block:
                blocks.append(_code_block(code_language, code_lines))
                code_lines = []
            else:
                code_language = stripped[len(FENCE):].strip() or None
            in_code_block = not in_code_block
            after_blank = False
            continue

        if in_code_block:
            code_lines.append(line)
            continue

        if not stripped:
            after_blank = True
            continue

        _add_line(blocks, stripped, continue_list=not after_blank)
        after_blank = False

    # Unterminated fence: keep what was collected
    if in_code_block:
        blocks.append(_code_block(code_language, code_lines))

    return Document(content=tuple(blocks) or (Paragraph(),))


def markdown_to_adf(markdown: str) -> dict[str, Any]:
    """Convert markdown-like text straight to an ADF ``doc`` dict."""
    return segment(markdown).to_adf()


def _add_line(blocks: list[Block], line: str, continue_list: bool) -> None:
    heading = _HEADING_RE.match(line)
    if heading:
        blocks.append(
            Heading(level=len(heading.group(1)), inline=tuple(format_inline(heading.group(2))))
        )
        return

    for pattern, list_type in ((_BULLET_RE, BulletList), (_ORDERED_RE, OrderedList)):
        item = pattern.match(line)
        if item:
            _append_item(blocks, list_type, _list_item(item.group(1)), continue_list)
            return

    blocks.append(Paragraph(inline=tuple(format_inline(line))))


def _append_item(
    blocks: list[Block],
    list_type: type[BulletList] | type[OrderedList],
    item: ListItem,
    continue_list: bool,
) -> None:
    """Extend the previous block if it is a list of the same kind, else start one."""
    last = blocks[-1] if blocks else None
    if continue_list and type(last) is list_type:
        blocks[-1] = list_type(items=last.items + (item,))
    else:
        blocks.append(list_type(items=(item,)))


def _list_item(text: str) -> ListItem:
    return ListItem(paragraph=Paragraph(inline=tuple(format_inline(text))))


def _code_block(language: str | None, lines: list[str]) -> CodeBlock:
    return CodeBlock(language=language, raw_text="\n".join(lines))


def _split_lines(text: str) -> list[str]:
    """Split on "\\n" only, dropping a trailing "\\r" from each line.

    Form feeds, vertical tabs and Unicode line separators stay inside the line.
    """
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
