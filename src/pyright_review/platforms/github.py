# src/pyright_review/platforms/github.py
import logging
from collections.abc import Sequence
from typing import Any
import httpx
from pyright_review.models import PullRequest, RemoteComment
from .base import CommentStore, CommentStoreError


logger = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubClient(CommentStore):
    def __init__(self, token: str, owner: str, repo: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.repo_url = f"{self.api_url}/repos/{owner}/{repo}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {path}")
        async with httpx.AsyncClient() as client:
            try:
                response = await client.request(
                    method,
                    f"{self.repo_url}{path}",
                    headers=self._headers(),
                    timeout=30.0,
                    **kwargs,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise CommentStoreError(
                    f"{method} {path} returned {e.response.status_code}: {e.response.text[:200]}"
                ) from e
            except httpx.HTTPError as e:
                raise CommentStoreError(f"{method} {path} failed: {e!r}") from e
        return response

    async def _list_all(self, path: str) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            response = await self._request("GET", path, params={"per_page": PER_PAGE, "page": page})
            batch = response.json()
            items.extend(batch)
            if len(batch) < PER_PAGE:
                return items
            page += 1

    async def get_pull_request(self, pr_number: int) -> PullRequest:
        response = await self._request("GET", f"/pulls/{pr_number}")
        return PullRequest.from_api(response.json())

    async def changed_files(
        self, base_sha: str, head_sha: str, extensions: Sequence[str] = (".py",)
    ) -> list[str]:
        """Files touched between two commits, without removed ones."""
        response = await self._request("GET", f"/compare/{base_sha}...{head_sha}")
        files = response.json().get("files") or []
        return [
            f["filename"]
            for f in files
            if f.get("status") != "removed" and f["filename"].endswith(tuple(extensions))
        ]

    async def list_issue_comments(self, pr_number: int) -> list[RemoteComment]:
        payload = await self._list_all(f"/issues/{pr_number}/comments")
        return [RemoteComment.from_api(c) for c in payload]

    async def create_issue_comment(self, pr_number: int, body: str) -> None:
        await self._request("POST", f"/issues/{pr_number}/comments", json={"body": body})

    async def update_comment(self, comment_id: int, body: str) -> None:
        await self._request("PATCH", f"/issues/comments/{comment_id}", json={"body": body})

    async def delete_issue_comment(self, comment_id: int) -> None:
        await self._request("DELETE", f"/issues/comments/{comment_id}")

    async def list_review_comments(self, pr_number: int) -> list[RemoteComment]:
        payload = await self._list_all(f"/pulls/{pr_number}/comments")
        return [RemoteComment.from_api(c) for c in payload]

    async def create_review_comment(
        self, pr_number: int, path: str, commit_sha: str, body: str
    ) -> None:
        # File-level comment: anchored to the file, not to a diff line
        await self._request(
            "POST",
            f"/pulls/{pr_number}/comments",
            json={
                "body": body,
                "commit_id": commit_sha,
                "path": path,
                "subject_type": "file",
            },
        )

    async def update_review_comment(self, comment_id: int, body: str) -> None:
        await self._request("PATCH", f"/pulls/comments/{comment_id}", json={"body": body})

    async def delete_review_comment(self, comment_id: int) -> None:
        await self._request("DELETE", f"/pulls/comments/{comment_id}")
