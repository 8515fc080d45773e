"""Guard that blocks write tools when read-only mode is enabled."""

from jira_mcp_server.guards.permissions import WRITE_TOOLS
from jira_mcp_server.jira.errors import JiraPermissionError
from jira_mcp_server.lifespan import get_settings


def check_read_only(tool_name: str) -> None:
    """Raise JiraPermissionError if ``tool_name`` writes and JIRA_READ_ONLY_MODE is true."""
    if tool_name not in WRITE_TOOLS:
        return
    settings = get_settings()
    if settings.read_only_mode:
        raise JiraPermissionError(
            f"Write operation {tool_name!r} blocked: JIRA_READ_ONLY_MODE is enabled."
        )
