from abc import ABC, abstractmethod
from pr_checks.models.comment import Comment


class CommentHost(ABC):
    """Issue/pull request comment operations of a source-control host."""

    @abstractmethod
    async def list_comments(self, owner: str, repo: str, issue_number: int) -> list[Comment]:
        pass

    @abstractmethod
    async def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Comment:
        pass

    @abstractmethod
    async def update_comment(self, owner: str, repo: str, comment_id: int, body: str) -> Comment:
        pass

    @abstractmethod
    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> None:
        pass
