# tests/unit/test_config.py
import pytest


def test_settings_loads_from_env(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("GITHUB_REPOSITORY", "facebook/react-native")
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/tmp/event.json")
    monkeypatch.setenv("PR_NUMBER", "123")

    from pr_checks.config import Settings
    settings = Settings()

    assert settings.github_token == "test-token"
    assert settings.github_repository == "facebook/react-native"
    assert settings.github_event_path == "/tmp/event.json"
    assert settings.pr_number == 123


def test_settings_defaults(monkeypatch):
    for name in ("GITHUB_API_URL", "COMMENT_MARKER", "COMMENT_HEADING", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    from pr_checks.config import Settings
    settings = Settings()

    assert settings.github_api_url == "https://api.github.com"
    assert settings.comment_marker == "<!-- pr-checks-bot -->"
    assert settings.comment_heading == "PR Validation"
    assert settings.log_level == "INFO"


def test_settings_default_marker_matches_reconciler():
    from pr_checks.comments.reconciler import COMMENT_HEADING, COMMENT_MARKER
    from pr_checks.config import Settings

    fields = Settings.model_fields
    assert fields["comment_marker"].default == COMMENT_MARKER
    assert fields["comment_heading"].default == COMMENT_HEADING


def test_settings_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    from pr_checks.config import Settings
    assert Settings().log_level == "DEBUG"


def test_settings_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    from pydantic import ValidationError
    from pr_checks.config import Settings
    with pytest.raises(ValidationError):
        Settings()
