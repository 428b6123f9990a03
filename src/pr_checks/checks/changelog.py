# src/pr_checks/checks/changelog.py
"""Changelog line validation for pull request descriptions.

A description carries its changelog entry either inline::

    Changelog: [iOS] [Fixed] - Fix crash when opening the modal

or on the first non-blank line under a heading::

    ## Changelog:

    [General] [Added] - Add `onPress` to Text

Internal changes may use ``[Internal]`` alone.
"""
import re
from enum import Enum


class ChangelogStatus(str, Enum):
    VALID = "valid"
    MISSING = "missing"
    INVALID = "invalid"


CATEGORIES = {"general", "ios", "android", "internal"}
TYPES = {"added", "changed", "deprecated", "removed", "fixed", "security", "breaking"}

HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
LABEL_RE = re.compile(r"^\s*(?:#{1,6}\s*changelog\s*:?|changelog\s*:)\s*(?P<rest>.*)$", re.IGNORECASE)
ENTRY_RE = re.compile(
    r"^(?:[-*+]\s+)?"
    r"\[(?P<category>[^\]]+)\]\s*"
    r"(?:\[(?P<type>[^\]]+)\]\s*)?"
    r"(?:-\s*)?(?P<message>.*)$"
)


def _find_entry(text: str) -> str | None:
    lines = HTML_COMMENT_RE.sub("", text).splitlines()
    for index, line in enumerate(lines):
        match = LABEL_RE.match(line)
        if not match:
            continue
        rest = match.group("rest").strip()
        if rest:
            return rest
        for following in lines[index + 1:]:
            if following.strip():
                return following.strip()
        return None
    return None


def validate_changelog(text: str | None) -> ChangelogStatus:
    """Classify the changelog entry in a pull request description."""
    entry = _find_entry(text or "")
    if entry is None:
        return ChangelogStatus.MISSING

    match = ENTRY_RE.match(entry)
    if not match:
        return ChangelogStatus.INVALID

    category = match.group("category").strip().lower()
    if category not in CATEGORIES:
        return ChangelogStatus.INVALID
    if category == "internal":
        return ChangelogStatus.VALID

    change_type = (match.group("type") or "").strip().lower()
    if change_type not in TYPES or not match.group("message").strip():
        return ChangelogStatus.INVALID
    return ChangelogStatus.VALID
