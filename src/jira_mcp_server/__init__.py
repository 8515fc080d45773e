"""Jira MCP server with markdown-to-ADF formatting for descriptions and comments."""

from jira_mcp_server.adf import adf_to_text, markdown_to_adf
from jira_mcp_server.jira.client import JiraClient
from jira_mcp_server.server import mcp
from jira_mcp_server.settings import JiraSettings

__all__ = ["mcp", "JiraSettings", "JiraClient", "adf_to_text", "markdown_to_adf"]
