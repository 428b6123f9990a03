from typing import Any
import httpx
from pr_checks.models.comment import Comment
from .base import CommentHost


class GitHubClient(CommentHost):
    def __init__(self, token: str, base_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def list_comments(self, owner: str, repo: str, issue_number: int) -> list[Comment]:
        """List all comments on an issue or pull request, following pagination."""
        comments: list[Comment] = []
        url: str | None = f"{self.api_url}/repos/{owner}/{repo}/issues/{issue_number}/comments"
        params: dict[str, Any] | None = {"per_page": 100}
        async with httpx.AsyncClient() as client:
            while url:
                response = await client.get(
                    url,
                    params=params,
                    headers=self._headers(),
                    timeout=30.0,
                )
                response.raise_for_status()
                comments.extend(Comment(**item) for item in response.json())

                # The next link already carries the query string
                url = response.links.get("next", {}).get("url")
                params = None
        return comments

    async def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Comment:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.api_url}/repos/{owner}/{repo}/issues/{issue_number}/comments",
                headers=self._headers(),
                json={"body": body},
                timeout=30.0,
            )
            response.raise_for_status()
            return Comment(**response.json())

    async def update_comment(self, owner: str, repo: str, comment_id: int, body: str) -> Comment:
        async with httpx.AsyncClient() as client:
            response = await client.patch(
                f"{self.api_url}/repos/{owner}/{repo}/issues/comments/{comment_id}",
                headers=self._headers(),
                json={"body": body},
                timeout=30.0,
            )
            response.raise_for_status()
            return Comment(**response.json())

    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> None:
        async with httpx.AsyncClient() as client:
            response = await client.delete(
                f"{self.api_url}/repos/{owner}/{repo}/issues/comments/{comment_id}",
                headers=self._headers(),
                timeout=30.0,
            )
            response.raise_for_status()
