from jira_mcp_server.adf.blocks import markdown_to_adf, segment
from jira_mcp_server.adf.inline import format_inline
from jira_mcp_server.adf.nodes import (
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Mark,
    MarkType,
    OrderedList,
    Paragraph,
    Text,
)
from jira_mcp_server.adf.text import adf_to_text

__all__ = [
    "BulletList",
    "CodeBlock",
    "Document",
    "Heading",
    "ListItem",
    "Mark",
    "MarkType",
    "OrderedList",
    "Paragraph",
    "Text",
    "adf_to_text",
    "format_inline",
    "markdown_to_adf",
    "segment",
]
