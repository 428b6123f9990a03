# tests/integration/test_cli.py
import json
import pytest
from click.testing import CliRunner
from unittest.mock import AsyncMock, patch
from pr_checks.cli import cli
from pr_checks.comments.reconciler import COMMENT_MARKER
from pr_checks.config import Settings
from pr_checks.models.comment import Comment


GOOD_BODY = """## Summary

Fix a crash when the modal is dismissed twice.

## Changelog:

[iOS] [Fixed] - Fix crash when dismissing a modal twice

## Test Plan

Opened and dismissed the modal in RNTester."""


@pytest.fixture
def event_file(tmp_path):
    def _write(body: str | None = GOOD_BODY, number: int = 123):
        path = tmp_path / "event.json"
        path.write_text(json.dumps({"pull_request": {"number": number, "body": body}}), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def mock_github():
    client = AsyncMock()
    client.list_comments.return_value = []
    return client


def _settings(**overrides) -> Settings:
    values = {
        "github_token": "test-token",
        "github_repository": "facebook/react-native",
        "github_event_path": None,
        "pr_number": None,
    }
    values.update(overrides)
    return Settings(**values)


def _invoke(settings: Settings, args: list[str], mock_github=None, input: str | None = None):
    runner = CliRunner()
    with patch("pr_checks.cli.get_settings", return_value=settings), \
         patch("pr_checks.cli.GitHubClient", return_value=mock_github or AsyncMock()):
        return runner.invoke(cli, args, input=input)


def test_validate_body_passes_from_event(event_file):
    result = _invoke(_settings(github_event_path=event_file()), ["validate-body"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {"message": "", "result": "PASS"}


def test_validate_body_fails_with_exit_code(event_file):
    result = _invoke(_settings(github_event_path=event_file(body=None)), ["validate-body"])

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["result"] == "FAIL"
    assert "Missing Description" in data["message"]


def test_validate_body_from_stdin():
    result = _invoke(_settings(), ["validate-body", "--body-file", "-"], input=GOOD_BODY)

    assert result.exit_code == 0
    assert json.loads(result.stdout)["result"] == "PASS"


def test_validate_body_from_file(tmp_path):
    body_file = tmp_path / "body.md"
    body_file.write_text("too short", encoding="utf-8")

    result = _invoke(_settings(), ["validate-body", "--body-file", str(body_file)])

    assert result.exit_code == 1


def test_post_comment_messages_creates_comment(event_file, mock_github):
    result = _invoke(
        _settings(github_event_path=event_file()),
        ["post-comment", "--message", "Message 1", "--message", "Message 2"],
        mock_github=mock_github,
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "created"
    owner, repo, issue_number, body = mock_github.create_comment.call_args.args
    assert (owner, repo, issue_number) == ("facebook", "react-native", 123)
    assert "Message 1\n\nMessage 2" in body


def test_post_comment_without_messages_deletes_comment(mock_github):
    mock_github.list_comments.return_value = [Comment(id=456, body=f"{COMMENT_MARKER}\nOld content")]

    result = _invoke(_settings(pr_number=77), ["post-comment"], mock_github=mock_github)

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "deleted"
    mock_github.list_comments.assert_called_once_with("facebook", "react-native", 77)
    mock_github.delete_comment.assert_called_once_with("facebook", "react-native", 456)


def test_post_comment_scratch_dir(tmp_path, mock_github):
    (tmp_path / "output.json").write_text(json.dumps({"breakingChanges": ["Foo"]}), encoding="utf-8")

    result = _invoke(
        _settings(pr_number=5),
        ["post-comment", "--scratch-dir", str(tmp_path), "--results-field", "breakingChanges"],
        mock_github=mock_github,
    )

    assert result.exit_code == 0, result.output
    body = mock_github.create_comment.call_args.args[3]
    assert "### Breaking API Changes Detected" in body


def test_post_comment_rejects_both_variants(tmp_path):
    result = _invoke(
        _settings(pr_number=5),
        ["post-comment", "--message", "x", "--scratch-dir", str(tmp_path)],
    )

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_post_comment_requires_pr_number():
    result = _invoke(_settings(), ["post-comment", "--message", "x"])

    assert result.exit_code == 2
    assert "PR_NUMBER" in result.output


def test_post_comment_requires_token():
    result = _invoke(_settings(github_token=None, pr_number=5), ["post-comment", "--message", "x"])

    assert result.exit_code == 2
    assert "GITHUB_TOKEN" in result.output


def test_post_comment_rejects_bad_repository():
    result = _invoke(_settings(github_repository="not-a-repo", pr_number=5), ["post-comment", "--message", "x"])

    assert result.exit_code == 2


def test_check_posts_validation_and_fails(event_file, mock_github):
    result = _invoke(
        _settings(github_event_path=event_file(body="")),
        ["check"],
        mock_github=mock_github,
    )

    assert result.exit_code == 1
    body = mock_github.create_comment.call_args.args[3]
    assert body.startswith(COMMENT_MARKER)
    assert "Missing Description" in body


def test_check_passing_body_removes_stale_comment(event_file, mock_github):
    mock_github.list_comments.return_value = [Comment(id=9, body=f"{COMMENT_MARKER}\nstale")]

    result = _invoke(_settings(github_event_path=event_file()), ["check"], mock_github=mock_github)

    assert result.exit_code == 0, result.output
    mock_github.delete_comment.assert_called_once_with("facebook", "react-native", 9)


def test_check_includes_results_section(event_file, mock_github, tmp_path):
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    (scratch / "output.json").write_text("not valid json", encoding="utf-8")

    result = _invoke(
        _settings(github_event_path=event_file()),
        ["check", "--scratch-dir", str(scratch)],
        mock_github=mock_github,
    )

    assert result.exit_code == 0, result.output
    body = mock_github.create_comment.call_args.args[3]
    assert body.endswith("\n\nnot valid json")


def test_validate_body_missing_file_is_usage_error(tmp_path):
    result = _invoke(_settings(), ["validate-body", "--body-file", str(tmp_path / "missing.md")])

    assert result.exit_code == 2
    assert "missing.md" in result.output


def test_invalid_log_level_is_usage_error():
    runner = CliRunner()
    with patch("pr_checks.cli.get_settings", side_effect=lambda: Settings(log_level="verbose")):
        result = runner.invoke(cli, ["validate-body", "--body-file", "-"], input=GOOD_BODY)

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
