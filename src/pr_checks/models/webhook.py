from pydantic import BaseModel


class GitHubUser(BaseModel):
    login: str


class GitHubRepository(BaseModel):
    name: str
    full_name: str
    owner: GitHubUser


class GitHubPullRequest(BaseModel):
    number: int
    title: str
    body: str | None = None
    state: str
    draft: bool = False


class GitHubPullRequestEvent(BaseModel):
    action: str  # "opened", "edited", "synchronize", ...
    number: int
    pull_request: GitHubPullRequest
    repository: GitHubRepository
    sender: GitHubUser | None = None
