"""Unit tests for configuration."""
from figma_mcp.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("FIGMA_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("SSE_KEEPALIVE_SECONDS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.figma_access_token == ""
    assert settings.has_token is False
    assert settings.figma_api_base_url == "https://api.figma.com/v1"
    assert settings.figma_timeout_seconds == 30.0
    assert settings.sse_keepalive_seconds == 30.0
    assert settings.service_name == "figma-mcp"
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("FIGMA_ACCESS_TOKEN", "figd_from_env")
    monkeypatch.setenv("SSE_KEEPALIVE_SECONDS", "5")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = Settings(_env_file=None)

    assert settings.figma_access_token == "figd_from_env"
    assert settings.has_token is True
    assert settings.sse_keepalive_seconds == 5.0
    assert settings.log_format == "json"


def test_blank_token_counts_as_missing(monkeypatch):
    monkeypatch.setenv("FIGMA_ACCESS_TOKEN", "   ")
    assert Settings(_env_file=None).has_token is False
