from enum import Enum
from pydantic import BaseModel, field_validator


class Comment(BaseModel):
    id: int
    body: str = ""

    @field_validator("body", mode="before")
    @classmethod
    def _none_body(cls, value):
        return value or ""


class RepoRef(BaseModel):
    owner: str
    repo: str

    @classmethod
    def parse(cls, full_name: str) -> "RepoRef":
        """Parse 'owner/repo' (the GITHUB_REPOSITORY form)."""
        owner, sep, repo = full_name.strip().partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ValueError(f"Invalid repository: {full_name!r} (expected 'owner/repo')")
        return cls(owner=owner, repo=repo)

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


class CommentAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    UNCHANGED = "unchanged"
