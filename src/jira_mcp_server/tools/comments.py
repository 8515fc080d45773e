"""Comment tools: add, list and delete comments on issues."""

from __future__ import annotations

import logging
from typing import Any

from jira_mcp_server.adf import adf_to_text, markdown_to_adf
from jira_mcp_server.guards.rate_limit import rate_limit
from jira_mcp_server.guards.read_only import check_read_only
from jira_mcp_server.lifespan import get_jira_client
from jira_mcp_server.server import mcp

logger = logging.getLogger("jira_mcp_server")


@mcp.tool()
@rate_limit
async def add_comment(
    issue_key: str,
    comment: str,
    attachments: list[str] | None = None,
) -> dict[str, Any]:
    """Add a comment to a Jira issue with optional file attachments.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        comment: Comment text. Supports headings, lists, code fences,
            **bold**, *italic*, ~~strike~~, `code` and [links](url).
        attachments: Absolute paths of files to attach to the issue before
            the comment is posted. Optional.

    Returns:
        The created comment and the metadata of any uploaded attachments.
    """
    check_read_only("add_comment")
    client = get_jira_client()

    uploaded: list[dict[str, Any]] = []
    for file_path in attachments or []:
        uploaded.extend(await client.add_attachment(issue_key, file_path))

    created = await client.add_comment(issue_key, markdown_to_adf(comment))
    logger.info(
        "Added comment %s to %s with %d attachment(s)", created.get("id"), issue_key, len(uploaded)
    )
    return {"comment": created, "attachments": uploaded}


@mcp.tool()
@rate_limit
async def get_comments(issue_key: str) -> list[dict[str, Any]]:
    """Get all comments on a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").

    Returns:
        List of comments, each with author, plain text body, and timestamps.
    """
    client = get_jira_client()
    result = await client.get_comments(issue_key)
    comments = result.get("comments", [])

    for comment in comments:
        if comment.get("body"):
            comment["_body_text"] = adf_to_text(comment["body"])

    return comments


@mcp.tool()
@rate_limit
async def delete_comment(issue_key: str, comment_id: str) -> str:
    """Delete a comment from a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        comment_id: The comment ID to delete.

    Returns:
        Confirmation message.
    """
    check_read_only("delete_comment")
    client = get_jira_client()
    await client.delete_comment(issue_key, comment_id)
    logger.info("Deleted comment %s from %s", comment_id, issue_key)
    return f"Comment {comment_id} deleted from {issue_key}."
