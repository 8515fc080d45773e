"""Entry point for running the Jira MCP server: python -m jira_mcp_server"""

import sys

from pydantic import ValidationError

import jira_mcp_server.tools  # noqa: F401 registers all tools with the server
from jira_mcp_server.logging.logger import setup_logger
from jira_mcp_server.server import mcp
from jira_mcp_server.settings import JiraSettings


def main() -> None:
    logger = setup_logger()
    try:
        settings = JiraSettings()
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        logger.error("Please set JIRA_URL, JIRA_EMAIL, and JIRA_API_TOKEN")
        sys.exit(1)

    setup_logger(level=settings.log_level)
    mcp.run()


if __name__ == "__main__":
    main()
