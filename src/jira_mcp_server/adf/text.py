"""Plain-text extraction from ADF documents returned by Jira."""

from __future__ import annotations

from typing import Any

_LINE_TERMINATED = ("paragraph", "heading", "codeBlock")


def adf_to_text(adf: dict[str, Any] | None) -> str:
    """Extract plain text from an ADF document.

    Top-level blocks are separated by a blank line, list items are prefixed
    with "- " or their number, and all marks are dropped.
    """
    if not adf:
        return ""
    return _extract_text(adf).strip()


def _extract_text(node: dict[str, Any], prefix: str = "") -> str:
    node_type = node.get("type")
    attrs = node.get("attrs") or {}
    if node_type == "text":
        return node.get("text", "")
    if node_type == "hardBreak":
        return "\n"
    if node_type in ("mention", "emoji"):
        return attrs.get("text", "")
    if node_type == "inlineCard":
        return attrs.get("url", "")

    children = node.get("content", [])
    if node_type == "bulletList":
        parts = [_extract_text(child, prefix="- ") for child in children]
    elif node_type == "orderedList":
        start = attrs.get("order", 1)
        parts = [_extract_text(child, prefix=f"{start + i}. ") for i, child in enumerate(children)]
    else:
        parts = [_extract_text(child) for child in children]

    result = ("\n" if node_type == "doc" else "").join(parts)
    if node_type == "listItem":
        result = prefix + result
    if node_type in _LINE_TERMINATED:
        result += "\n"
    return result
