from jira_mcp_server.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from jira_mcp_server.guards.rate_limit import rate_limit, reset_limiter
from jira_mcp_server.guards.read_only import check_read_only

__all__ = [
    "ALL_TOOLS",
    "READ_TOOLS",
    "WRITE_TOOLS",
    "check_read_only",
    "rate_limit",
    "reset_limiter",
]
