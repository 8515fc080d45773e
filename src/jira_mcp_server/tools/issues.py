"""Issue management tools: get, create, update."""

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
async def get_issue(issue_key: str, fields: list[str] | None = None) -> dict[str, Any]:
    """Get details of a Jira issue by key (e.g. "PROJ-123").

    Args:
        issue_key: The issue key.
        fields: Field names to retrieve (e.g. ["summary", "status", "description"]).
            Use this to limit response size. Returns all fields when omitted.

    Returns:
        Issue data. When a description is present it is returned as both raw
        ADF and extracted plain text in _description_text.
    """
    client = get_jira_client()
    issue = await client.get_issue(issue_key, fields=fields)

    description = issue.get("fields", {}).get("description")
    if description:
        issue["_description_text"] = adf_to_text(description)

    return issue


@mcp.tool()
@rate_limit
async def create_issue(
    project: str,
    summary: str,
    issue_type: str,
    description: str | None = None,
) -> dict[str, Any]:
    """Create a new Jira issue.

    Args:
        project: The project key (e.g. "PROJ").
        summary: Issue title/summary.
        issue_type: Issue type name (e.g. "Task", "Bug", "Story").
        description: Issue description. Supports headings, lists, code fences,
            **bold**, *italic*, ~~strike~~, `code` and [links](url).

    Returns:
        Created issue data with id, key, and self URL.
    """
    check_read_only("create_issue")
    client = get_jira_client()

    fields: dict[str, Any] = {
        "project": {"key": project},
        "summary": summary,
        "issuetype": {"name": issue_type},
    }
    if description:
        fields["description"] = markdown_to_adf(description)

    created = await client.create_issue(fields)
    logger.info("Created issue %s in project %s", created.get("key"), project)
    return created


@mcp.tool()
@rate_limit
async def update_issue(
    issue_key: str,
    summary: str | None = None,
    description: str | None = None,
) -> str:
    """Update the summary and/or description of an existing Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        summary: New summary. Optional.
        description: New description, same markup as create_issue. Optional.

    Returns:
        Confirmation message.
    """
    check_read_only("update_issue")
    client = get_jira_client()

    fields: dict[str, Any] = {}
    if summary is not None:
        fields["summary"] = summary
    if description is not None:
        fields["description"] = markdown_to_adf(description)

    if not fields:
        return "No fields to update."

    await client.update_issue(issue_key, fields)
    logger.info("Updated issue %s (%s)", issue_key, ", ".join(sorted(fields)))
    return f"Issue {issue_key} updated successfully."
