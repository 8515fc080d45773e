"""Document tree for the Atlassian Document Format (ADF).

Jira REST API v3 takes rich text as nested ``{"type": ..., "content": [...]}``
objects. The converter builds these frozen models first and serializes them
with ``to_adf()`` right before the request is sent.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


class MarkType(str, Enum):
    STRONG = "strong"
    EMPHASIS = "em"
    STRIKE = "strike"
    CODE = "code"
    LINK = "link"


class Mark(BaseModel):
    """Style annotation on an inline run. Links carry their target in ``href``."""

    type: MarkType
    href: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def link(cls, href: str) -> Mark:
        return cls(type=MarkType.LINK, href=href)

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": self.type.value}
        if self.type is MarkType.LINK:
            node["attrs"] = {"href": self.href}
        return node


class Text(BaseModel):
    content: str
    marks: tuple[Mark, ...] = ()

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": "text", "text": self.content}
        if self.marks:
            node["marks"] = [mark.to_adf() for mark in self.marks]
        return node


class Paragraph(BaseModel):
    inline: tuple[Text, ...] = ()

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        return {"type": "paragraph", "content": [run.to_adf() for run in self.inline]}


class Heading(BaseModel):
    level: int = Field(ge=1, le=6)
    inline: tuple[Text, ...] = ()

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "heading",
            "attrs": {"level": self.level},
            "content": [run.to_adf() for run in self.inline],
        }


class CodeBlock(BaseModel):
    language: str | None = None
    raw_text: str = ""

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": "codeBlock"}
        if self.language:
            node["attrs"] = {"language": self.language}
        # ADF rejects empty text nodes
        node["content"] = [{"type": "text", "text": self.raw_text}] if self.raw_text else []
        return node


class ListItem(BaseModel):
    paragraph: Paragraph

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        return {"type": "listItem", "content": [self.paragraph.to_adf()]}


class BulletList(BaseModel):
    items: tuple[ListItem, ...] = ()

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        return {"type": "bulletList", "content": [item.to_adf() for item in self.items]}


class OrderedList(BaseModel):
    items: tuple[ListItem, ...] = ()

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        return {"type": "orderedList", "content": [item.to_adf() for item in self.items]}


Block = Union[Paragraph, Heading, CodeBlock, BulletList, OrderedList]


class Document(BaseModel):
    """Root node. Always holds at least one block."""

    content: tuple[Block, ...] = Field(default_factory=lambda: (Paragraph(),), min_length=1)

    model_config = {"frozen": True}

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "doc",
            "version": 1,
            "content": [block.to_adf() for block in self.content],
        }
