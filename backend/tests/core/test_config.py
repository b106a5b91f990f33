"""Settings — tests for environment-driven configuration."""

from slackgate.config import Settings


def _clear(monkeypatch):
    for name in ("SLACK_TOKEN", "SLACK_BOT_TOKEN", "SLACK_TEAM_ID"):
        monkeypatch.delenv(name, raising=False)


def test_reads_slack_token(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("SLACK_TOKEN", "xoxp-user")
    monkeypatch.setenv("SLACK_TEAM_ID", "T1")
    settings = Settings(_env_file=None)
    assert settings.slack_token == "xoxp-user"
    assert settings.slack_team_id == "T1"
    assert settings.missing_credentials() == []


def test_bot_token_fallback(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-bot")
    settings = Settings(_env_file=None)
    assert settings.slack_token == "xoxb-bot"


def test_missing_credentials_listed(monkeypatch):
    _clear(monkeypatch)
    settings = Settings(_env_file=None)
    assert settings.missing_credentials() == [
        "SLACK_TOKEN (or SLACK_BOT_TOKEN)", "SLACK_TEAM_ID",
    ]


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.delenv("SLACK_TIMEOUT_SECONDS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.slack_timeout_seconds == 20.0
    assert settings.slack_api_base_url == "https://slack.com/api/"
