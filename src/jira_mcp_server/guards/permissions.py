"""Permission sets defining read-only vs write tool groups."""

READ_TOOLS = frozenset({
    "get_issue",
    "search_issues",
    "get_comments",
    "get_attachments",
    "download_attachment",
})

WRITE_TOOLS = frozenset({
    "create_issue",
    "update_issue",
    "add_comment",
    "delete_comment",
    "add_attachment",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS
