# src/pr_checks/comments/reconciler.py
import logging
from collections.abc import Iterable, Sequence
from pr_checks.models.comment import Comment, CommentAction, RepoRef
from pr_checks.models.sources import SectionSource
from pr_checks.platforms.base import CommentHost
from .sources import derive_sections


logger = logging.getLogger(__name__)

COMMENT_MARKER = "<!-- pr-checks-bot -->"
COMMENT_HEADING = "PR Validation"


def filter_sections(sections: Iterable[str | None]) -> list[str]:
    """Drop missing, empty and whitespace-only sections."""
    return [section for section in sections if section is not None and section.strip()]


def find_tracked_comment(comments: Sequence[Comment], marker: str) -> Comment | None:
    """Return the first comment whose body contains the marker."""
    return next((comment for comment in comments if marker in comment.body), None)


def build_comment_body(sections: Sequence[str], marker: str, heading: str) -> str:
    return f"{marker}\n## {heading}\n\n" + "\n\n".join(sections)


class CommentReconciler:
    """Keeps a single marked comment on a pull request in sync with a report.

    Creates the comment when there is something to report, replaces its
    body on later runs, and deletes it once the report is empty.
    """

    def __init__(
        self,
        host: CommentHost,
        marker: str = COMMENT_MARKER,
        heading: str = COMMENT_HEADING,
    ):
        self.host = host
        self.marker = marker
        self.heading = heading

    async def reconcile(
        self,
        repo: RepoRef,
        pr_number: int,
        sections: Iterable[str | None],
    ) -> CommentAction:
        sections = filter_sections(sections)

        comments = await self.host.list_comments(repo.owner, repo.repo, pr_number)
        existing = find_tracked_comment(comments, self.marker)

        if not sections:
            logger.info("No issues to report")
            if existing is None:
                return CommentAction.UNCHANGED
            logger.info(f"Deleting existing comment {existing.id}")
            await self.host.delete_comment(repo.owner, repo.repo, existing.id)
            return CommentAction.DELETED

        body = build_comment_body(sections, self.marker, self.heading)

        if existing is not None:
            logger.info(f"Updating existing comment {existing.id}")
            await self.host.update_comment(repo.owner, repo.repo, existing.id, body)
            return CommentAction.UPDATED

        logger.info("Creating new comment")
        await self.host.create_comment(repo.owner, repo.repo, pr_number, body)
        return CommentAction.CREATED

    async def reconcile_source(
        self,
        repo: RepoRef,
        pr_number: int,
        source: SectionSource,
    ) -> CommentAction:
        """Derive sections from a messages list or results file, then reconcile."""
        return await self.reconcile(repo, pr_number, derive_sections(source))
