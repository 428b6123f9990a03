from .changelog import ChangelogStatus, validate_changelog
from .pr_body import validate_pr_body

__all__ = ["ChangelogStatus", "validate_changelog", "validate_pr_body"]
