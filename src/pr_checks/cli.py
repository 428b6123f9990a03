# src/pr_checks/cli.py
"""Command-line entry points for GitHub Actions workflow steps.

Usage:
    pr-checks validate-body [--body-file PATH]
    pr-checks post-comment --message TEXT [--message TEXT ...]
    pr-checks post-comment --scratch-dir DIR [--results-field breakingChanges]
    pr-checks check [--body-file PATH] [--scratch-dir DIR]

Repository, pull request number and token come from the workflow
environment (GITHUB_REPOSITORY, GITHUB_EVENT_PATH or PR_NUMBER, GITHUB_TOKEN).

Exit Codes:
    0: Success
    1: The pull request description failed validation
    2: Invalid usage or missing workflow context
"""
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import click
from pydantic import ValidationError

from pr_checks.checks.pr_body import validate_pr_body
from pr_checks.comments.reconciler import CommentReconciler
from pr_checks.comments.sources import results_file_section
from pr_checks.config import Settings, get_settings
from pr_checks.models.comment import RepoRef
from pr_checks.models.sources import MessagesSource, ResultsField, ResultsFileSource
from pr_checks.models.validation import ValidationResult, Verdict
from pr_checks.platforms.github import GitHubClient


logger = logging.getLogger(__name__)


def _load_event(settings: Settings) -> dict[str, Any]:
    if not settings.github_event_path:
        return {}
    return json.loads(Path(settings.github_event_path).read_text(encoding="utf-8"))


def _resolve_target(settings: Settings) -> tuple[RepoRef, int]:
    if not settings.github_repository:
        raise click.UsageError("GITHUB_REPOSITORY is not set")
    try:
        repo = RepoRef.parse(settings.github_repository)
    except ValueError as e:
        raise click.UsageError(str(e))

    pr_number = settings.pr_number
    if pr_number is None:
        pr_number = _load_event(settings).get("pull_request", {}).get("number")
    if pr_number is None:
        raise click.UsageError("No pull request number: set PR_NUMBER or run on a pull_request event")
    return repo, int(pr_number)


def _read_body(settings: Settings, body_file: TextIO | None) -> str | None:
    if body_file is not None:
        return body_file.read()
    return _load_event(settings).get("pull_request", {}).get("body")


def _reconciler(settings: Settings) -> CommentReconciler:
    if not settings.github_token:
        raise click.UsageError("GITHUB_TOKEN is not set")
    github = GitHubClient(token=settings.github_token, base_url=settings.github_api_url)
    return CommentReconciler(
        host=github,
        marker=settings.comment_marker,
        heading=settings.comment_heading,
    )


def _emit(result: ValidationResult) -> None:
    click.echo(result.model_dump_json(include={"message", "result"}, indent=2))


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Pull request checks for CI workflows."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration: {e}")
    logging.basicConfig(level=settings.log_level)
    ctx.obj = settings


@cli.command("validate-body")
@click.option("--body-file", type=click.File("r", encoding="utf-8"), default=None, help="File with the PR body ('-' for stdin).")
@click.pass_obj
def validate_body(settings: Settings, body_file: TextIO | None) -> None:
    """Validate the pull request description."""
    result = validate_pr_body(_read_body(settings, body_file))
    _emit(result)
    if result.result == Verdict.FAIL:
        sys.exit(1)


@cli.command("post-comment")
@click.option("--message", "messages", multiple=True, help="Comment section (repeatable).")
@click.option("--scratch-dir", type=click.Path(file_okay=False, path_type=Path), default=None)
@click.option(
    "--results-field",
    type=click.Choice([f.value for f in ResultsField]),
    default=ResultsField.CHANGED_APIS.value,
    show_default=True,
)
@click.pass_obj
def post_comment(
    settings: Settings,
    messages: tuple[str, ...],
    scratch_dir: Path | None,
    results_field: str,
) -> None:
    """Create, update or delete the tracked bot comment."""
    if messages and scratch_dir is not None:
        raise click.UsageError("--message and --scratch-dir are mutually exclusive")

    if scratch_dir is not None:
        source = ResultsFileSource(scratch_dir=scratch_dir, field=ResultsField(results_field))
    else:
        source = MessagesSource(messages=list(messages))

    repo, pr_number = _resolve_target(settings)
    action = asyncio.run(_reconciler(settings).reconcile_source(repo, pr_number, source))
    click.echo(action.value)


@cli.command("check")
@click.option("--body-file", type=click.File("r", encoding="utf-8"), default=None, help="File with the PR body ('-' for stdin).")
@click.option("--scratch-dir", type=click.Path(file_okay=False, path_type=Path), default=None)
@click.option(
    "--results-field",
    type=click.Choice([f.value for f in ResultsField]),
    default=ResultsField.CHANGED_APIS.value,
    show_default=True,
)
@click.pass_obj
def check(
    settings: Settings,
    body_file: TextIO | None,
    scratch_dir: Path | None,
    results_field: str,
) -> None:
    """Validate the description and report the outcome in the bot comment."""
    repo, pr_number = _resolve_target(settings)
    reconciler = _reconciler(settings)

    result = validate_pr_body(_read_body(settings, body_file))
    sections = [result.message]
    if scratch_dir is not None:
        sections.append(results_file_section(scratch_dir, ResultsField(results_field)))

    action = asyncio.run(reconciler.reconcile(repo, pr_number, sections))
    logger.info(f"Comment {action.value}")

    _emit(result)
    if result.result == Verdict.FAIL:
        sys.exit(1)


if __name__ == "__main__":
    cli()
