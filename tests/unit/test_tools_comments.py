"""Tests for comment tools using a mocked JiraClient."""

from __future__ import annotations

import pytest

from jira_mcp_server.adf import markdown_to_adf
from jira_mcp_server.jira.errors import JiraAttachmentError, JiraPermissionError
from jira_mcp_server.tools.comments import add_comment, delete_comment, get_comments


async def test_add_comment_converts_markup(call_tool, mock_client):
    mock_client.add_comment.return_value = {"id": "10"}

    result = await call_tool(add_comment, issue_key="PROJ-1", comment="Fixed in `v2`")

    mock_client.add_comment.assert_awaited_once_with("PROJ-1", markdown_to_adf("Fixed in `v2`"))
    mock_client.add_attachment.assert_not_awaited()
    assert result == {"comment": {"id": "10"}, "attachments": []}


async def test_add_comment_uploads_attachments_first(call_tool, mock_client):
    calls: list[str] = []

    async def upload(issue_key, file_path):
        calls.append(f"upload {file_path}")
        return [{"id": file_path[-1], "filename": file_path}]

    async def comment(issue_key, body):
        calls.append("comment")
        return {"id": "11"}

    mock_client.add_attachment.side_effect = upload
    mock_client.add_comment.side_effect = comment

    result = await call_tool(
        add_comment, issue_key="PROJ-1", comment="See logs", attachments=["/tmp/a", "/tmp/b"]
    )

    assert calls == ["upload /tmp/a", "upload /tmp/b", "comment"]
    assert [a["id"] for a in result["attachments"]] == ["a", "b"]
    assert result["comment"] == {"id": "11"}


async def test_add_comment_not_posted_when_upload_fails(call_tool, mock_client):
    mock_client.add_attachment.side_effect = JiraAttachmentError("Attachment file not found: /nope")

    with pytest.raises(JiraAttachmentError):
        await call_tool(add_comment, issue_key="PROJ-1", comment="x", attachments=["/nope"])

    mock_client.add_comment.assert_not_awaited()


async def test_get_comments_adds_plain_text(call_tool, mock_client):
    mock_client.get_comments.return_value = {
        "comments": [
            {"id": "1", "body": markdown_to_adf("**LGTM**")},
            {"id": "2", "body": None},
        ]
    }

    comments = await call_tool(get_comments, issue_key="PROJ-1")

    assert comments[0]["_body_text"] == "LGTM"
    assert "_body_text" not in comments[1]


async def test_delete_comment(call_tool, mock_client):
    message = await call_tool(delete_comment, issue_key="PROJ-1", comment_id="10")

    mock_client.delete_comment.assert_awaited_once_with("PROJ-1", "10")
    assert message == "Comment 10 deleted from PROJ-1."


async def test_delete_comment_blocked_in_read_only_mode(call_tool, mock_client, settings):
    settings.read_only_mode = True

    with pytest.raises(JiraPermissionError):
        await call_tool(delete_comment, issue_key="PROJ-1", comment_id="10")

    mock_client.delete_comment.assert_not_awaited()
