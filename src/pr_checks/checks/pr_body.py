# src/pr_checks/checks/pr_body.py
from collections.abc import Callable
from pr_checks.models.validation import BlockLevel, MessageBlock, ValidationResult, Verdict
from .changelog import ChangelogStatus, validate_changelog


MIN_DESCRIPTION_LENGTH = 50
MAX_LINES_WITHOUT_SUMMARY = 2

EXTERNAL_ORIGIN_MARKER = "differential revision:"
SUMMARY_MARKERS = ("## summary", "summary:")
TEST_PLAN_MARKERS = ("## test plan", "test plan:", "tests:", "test:")

CHANGELOG_DOCS_URL = "https://reactnative.dev/contributing/changelogs-in-pull-requests"


def validate_pr_body(
    pr_body: str | None,
    changelog_validator: Callable[[str], ChangelogStatus | str] = validate_changelog,
) -> ValidationResult:
    """Check a pull request description for the required sections.

    Descriptions exported from Phabricator (they carry a "Differential
    Revision:" line) only get the description length check.
    """
    body = pr_body or ""
    body_lower = body.lower()
    is_external = EXTERNAL_ORIGIN_MARKER in body_lower

    blocks: list[MessageBlock] = []

    def warn(title: str, text: str) -> None:
        blocks.append(MessageBlock(level=BlockLevel.WARNING, title=title, text=text))

    def fail(title: str, text: str) -> None:
        blocks.append(MessageBlock(level=BlockLevel.CAUTION, title=title, text=text))

    # Description and summary
    if len(body) < MIN_DESCRIPTION_LENGTH:
        fail("Missing Description", "This pull request needs a description.")
    else:
        has_summary = any(marker in body_lower for marker in SUMMARY_MARKERS)
        if not has_summary and len(body.split("\n")) <= MAX_LINES_WITHOUT_SUMMARY and not is_external:
            warn(
                "Missing Summary",
                'Can you add a Summary? To do so, add a "## Summary" section to your PR description. '
                "This is a good place to explain the motivation for making this change.",
            )

    # Test plan
    if not is_external and not any(marker in body_lower for marker in TEST_PLAN_MARKERS):
        warn(
            "Missing Test Plan",
            'Can you add a Test Plan? To do so, add a "## Test Plan" section to your PR description. '
            "A Test Plan lets us know how these changes were tested.",
        )

    # Changelog
    if not is_external:
        status = ChangelogStatus(changelog_validator(body))
        if status == ChangelogStatus.MISSING:
            fail(
                "Missing Changelog",
                f"Please add a Changelog to your PR description. See [Changelog format]({CHANGELOG_DOCS_URL})",
            )
        elif status == ChangelogStatus.INVALID:
            fail(
                "Invalid Changelog Format",
                f"Please verify your Changelog format. See [Changelog format]({CHANGELOG_DOCS_URL})",
            )

    has_fail = any(block.is_fatal for block in blocks)
    return ValidationResult(
        message="\n\n".join(block.render() for block in blocks),
        result=Verdict.FAIL if has_fail else Verdict.PASS,
        blocks=blocks,
    )
