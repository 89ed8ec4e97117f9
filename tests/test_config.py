"""
Tests for loading settings from the environment.
"""

import pytest
from pydantic import ValidationError
from unittest.mock import patch
from notion_markdown.config import Settings, load_settings


def test_defaults(monkeypatch):
    """Test settings when nothing is set in the environment."""
    for name in ("NOTION_TOKEN", "NOTION_TIMEOUT_MS", "NOTION_MARKDOWN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    with patch("notion_markdown.config.load_dotenv"):
        settings = load_settings()

    assert settings == Settings()


def test_environment_overrides(monkeypatch):
    """Test reading every setting from the environment."""
    monkeypatch.setenv("NOTION_TOKEN", "secret")
    monkeypatch.setenv("NOTION_TIMEOUT_MS", "1500")
    monkeypatch.setenv("NOTION_MARKDOWN_LOG_LEVEL", "debug")

    with patch("notion_markdown.config.load_dotenv") as load_dotenv:
        settings = load_settings()

    load_dotenv.assert_called_once()
    assert settings.notion_token == "secret"
    assert settings.timeout_ms == 1500
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("NOTION_TIMEOUT_MS", "abc"),
        ("NOTION_TIMEOUT_MS", "0"),
        ("NOTION_MARKDOWN_LOG_LEVEL", "verbose"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    """Test that unusable environment values fail validation."""
    monkeypatch.setenv(name, value)

    with patch("notion_markdown.config.load_dotenv"), pytest.raises(ValidationError):
        load_settings()
