from .comment import Comment, CommentAction, RepoRef
from .sources import MessagesSource, ResultsField, ResultsFileSource, SectionSource
from .validation import BlockLevel, MessageBlock, ValidationResult, Verdict
from .webhook import GitHubPullRequestEvent

__all__ = [
    "Comment",
    "CommentAction",
    "RepoRef",
    "MessagesSource",
    "ResultsField",
    "ResultsFileSource",
    "SectionSource",
    "BlockLevel",
    "MessageBlock",
    "ValidationResult",
    "Verdict",
    "GitHubPullRequestEvent",
]
