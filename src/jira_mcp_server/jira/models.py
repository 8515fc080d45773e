"""Pydantic models for Jira attachment payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field


class JiraUser(BaseModel):
    account_id: str = Field(alias="accountId", default="")
    display_name: str = Field(alias="displayName", default="")
    email_address: str | None = Field(alias="emailAddress", default=None)

    model_config = {"populate_by_name": True}


class JiraAttachment(BaseModel):
    """Attachment metadata as listed on an issue. ``content`` is the download URL."""

    id: str = ""
    filename: str = ""
    author: JiraUser | None = None
    created: str | None = None
    size: int = 0
    mime_type: str = Field(alias="mimeType", default="")
    content: str = ""

    model_config = {"populate_by_name": True}


class AttachmentDownload(BaseModel):
    id: str = ""
    filename: str = ""
    mime_type: str = Field(alias="mimeType", default="")
    size: int = 0
    saved_path: str = Field(alias="savedPath", default="")

    model_config = {"populate_by_name": True}
