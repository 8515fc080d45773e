"""Search tool: JQL search."""

from __future__ import annotations

from typing import Any

from jira_mcp_server.adf import adf_to_text
from jira_mcp_server.guards.rate_limit import rate_limit
from jira_mcp_server.lifespan import get_jira_client, get_settings
from jira_mcp_server.server import mcp


@mcp.tool()
@rate_limit
async def search_issues(
    jql: str,
    max_results: int | None = None,
    next_page_token: str | None = None,
) -> dict[str, Any]:
    """Search for Jira issues using JQL (Jira Query Language).

    Args:
        jql: JQL query string (e.g. 'project = PROJ AND status = "To Do"').
        max_results: Maximum number of results. Defaults to server config (50).
        next_page_token: Token from a previous response to fetch the next page.

    Returns:
        Matching issues with summary, status, assignee, reporter, created and
        updated fields, plus nextPageToken when more results exist.
    """
    client = get_jira_client()
    settings = get_settings()
    limit = max_results if max_results is not None else settings.max_results

    result = await client.search_issues(jql, max_results=limit, next_page_token=next_page_token)

    for issue in result.get("issues", []):
        desc = issue.get("fields", {}).get("description")
        if desc:
            issue["_description_text"] = adf_to_text(desc)

    return result
