"""Attachment tools: list, download and upload issue attachments."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from jira_mcp_server.guards.rate_limit import rate_limit
from jira_mcp_server.guards.read_only import check_read_only
from jira_mcp_server.jira.models import AttachmentDownload, JiraAttachment
from jira_mcp_server.lifespan import get_jira_client, get_settings
from jira_mcp_server.server import mcp

logger = logging.getLogger("jira_mcp_server")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def safe_filename(filename: str, fallback: str) -> str:
    """Replace anything outside letters, digits, '.', '_' and '-' with '_'.

    Names that would resolve to a directory ("", ".", "..") become ``fallback``.
    """
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", filename)
    if cleaned in ("", ".", ".."):
        return fallback
    return cleaned


@mcp.tool()
@rate_limit
async def get_attachments(issue_key: str) -> list[dict[str, Any]]:
    """Get all attachments for a Jira issue, including metadata and download URLs.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").

    Returns:
        List of attachments with id, filename, author, created, size,
        mimeType and content (the download URL).
    """
    client = get_jira_client()
    issue = await client.get_issue(issue_key, fields=["attachment"])
    raw = issue.get("fields", {}).get("attachment") or []
    return [
        JiraAttachment.model_validate(item).model_dump(by_alias=True)
        for item in raw
    ]


@mcp.tool()
@rate_limit
async def download_attachment(attachment_id: str, output_dir: str | None = None) -> dict[str, Any]:
    """Download a specific attachment from a Jira issue and save it to disk.

    Args:
        attachment_id: The attachment ID.
        output_dir: Directory to save the file in. Created if missing.
            Defaults to JIRA_ATTACHMENT_DIR, or the current directory.

    Returns:
        id, filename, mimeType, size and savedPath of the written file.
    """
    client = get_jira_client()
    settings = get_settings()

    metadata = await client.get_attachment(attachment_id)
    data = await client.download_attachment_content(metadata["content"])

    save_dir = Path(output_dir or settings.attachment_dir or Path.cwd())
    save_dir.mkdir(parents=True, exist_ok=True)
    filename = safe_filename(metadata.get("filename", ""), fallback=f"attachment-{attachment_id}")
    full_path = save_dir / filename
    full_path.write_bytes(data)
    logger.info("Saved attachment %s to %s", attachment_id, full_path)

    result = AttachmentDownload(
        id=str(metadata.get("id", attachment_id)),
        filename=metadata.get("filename", ""),
        mime_type=metadata.get("mimeType", ""),
        size=metadata.get("size", len(data)),
        saved_path=str(full_path),
    )
    return result.model_dump(by_alias=True)


@mcp.tool()
@rate_limit
async def add_attachment(issue_key: str, file_path: str) -> list[dict[str, Any]]:
    """Upload and attach a file to a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        file_path: Absolute path to the file to attach.

    Returns:
        Metadata of the created attachment(s).
    """
    check_read_only("add_attachment")
    client = get_jira_client()
    uploaded = await client.add_attachment(issue_key, file_path)
    logger.info("Attached %s to %s", file_path, issue_key)
    return uploaded
