"""FastMCP server instance."""

from fastmcp import FastMCP

from jira_mcp_server.lifespan import lifespan

mcp = FastMCP("jira-mcp-server", lifespan=lifespan)
