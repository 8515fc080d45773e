"""Async Jira REST API v3 client using httpx."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from jira_mcp_server.jira.errors import (
    JiraAPIError,
    JiraAttachmentError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)
from jira_mcp_server.utils.retry import retry
from jira_mcp_server.utils.timing import timed

logger = logging.getLogger("jira_mcp_server")

_ERROR_MAP: dict[int, type[JiraAPIError]] = {
    400: JiraValidationError,
    401: JiraAuthenticationError,
    403: JiraPermissionError,
    404: JiraNotFoundError,
    429: JiraRateLimitError,
}

DEFAULT_SEARCH_FIELDS = ["summary", "status", "assignee", "reporter", "created", "updated"]


class JiraClient:
    """Async wrapper around Jira REST API v3."""

    def __init__(
        self,
        base_url: str,
        email: str,
        api_token: str,
        timeout: int = 30,
        ssl_verify: bool | str = True,
    ):
        self._base_url = base_url.rstrip("/")
        # Content-Type is left to httpx so multipart uploads are not sent as JSON
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/rest/api/3",
            auth=(email, api_token),
            headers={"Accept": "application/json"},
            timeout=timeout,
            verify=ssl_verify,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 400:
            body = response.text
            error_cls = _ERROR_MAP.get(response.status_code)
            message = f"Jira API {method} {path} failed ({response.status_code}): {body}"
            if error_cls is None:
                raise JiraAPIError(message, status_code=response.status_code)
            raise error_cls(message)
        return response

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._send(method, path, **kwargs)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @retry()
    async def _get(self, path: str, **params: Any) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Any) -> Any:
        return await self._request("POST", path, json=json)

    async def _put(self, path: str, json: Any) -> Any:
        return await self._request("PUT", path, json=json)

    async def _delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def get_issue(self, issue_key: str, fields: list[str] | None = None) -> dict[str, Any]:
        if fields:
            return await self._get(f"/issue/{issue_key}", fields=",".join(fields))
        return await self._get(f"/issue/{issue_key}")

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._post("/issue", json={"fields": fields})

    async def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        await self._put(f"/issue/{issue_key}", json={"fields": fields})

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_issues(
        self,
        jql: str,
        max_results: int = 50,
        fields: list[str] | None = None,
        next_page_token: str | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "jql": jql,
            "maxResults": max_results,
            "fields": fields or DEFAULT_SEARCH_FIELDS,
        }
        if next_page_token:
            payload["nextPageToken"] = next_page_token
        return await self._post("/search/jql", json=payload)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def get_comments(self, issue_key: str) -> dict[str, Any]:
        return await self._get(f"/issue/{issue_key}/comment")

    async def add_comment(self, issue_key: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"/issue/{issue_key}/comment", json={"body": body})

    async def delete_comment(self, issue_key: str, comment_id: str) -> None:
        await self._delete(f"/issue/{issue_key}/comment/{comment_id}")

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    async def get_attachment(self, attachment_id: str) -> dict[str, Any]:
        return await self._get(f"/attachment/{attachment_id}")

    @timed
    async def download_attachment_content(self, content_url: str) -> bytes:
        """Fetch attachment bytes. ``content_url`` is the absolute URL from the metadata."""
        response = await self._send("GET", content_url, follow_redirects=True)
        return response.content

    @timed
    async def add_attachment(self, issue_key: str, file_path: str) -> list[dict[str, Any]]:
        path = Path(file_path)
        if not path.is_file():
            raise JiraAttachmentError(f"Attachment file not found: {file_path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise JiraAttachmentError(f"Could not read attachment {file_path}: {e}") from e

        logger.debug("Uploading %s (%d bytes) to %s", path.name, len(data), issue_key)
        return await self._request(
            "POST",
            f"/issue/{issue_key}/attachments",
            files={"file": (path.name, data)},
            headers={"X-Atlassian-Token": "no-check"},
        )

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_myself(self) -> dict[str, Any]:
        return await self._get("/myself")
