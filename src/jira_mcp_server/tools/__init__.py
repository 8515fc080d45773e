"""MCP tool modules. Importing this package registers every tool with the server."""

from jira_mcp_server.tools import attachments, comments, issues, search

__all__ = ["attachments", "comments", "issues", "search"]
