from jira_mcp_server.jira.client import JiraClient
from jira_mcp_server.jira.errors import (
    JiraAPIError,
    JiraAttachmentError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)
from jira_mcp_server.jira.models import AttachmentDownload, JiraAttachment, JiraUser

__all__ = [
    "AttachmentDownload",
    "JiraAPIError",
    "JiraAttachment",
    "JiraAttachmentError",
    "JiraAuthenticationError",
    "JiraClient",
    "JiraNotFoundError",
    "JiraPermissionError",
    "JiraRateLimitError",
    "JiraUser",
    "JiraValidationError",
]
