"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chat_proxy.config.settings import Settings


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("CHAT_VENDOR", " OpenAI ")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("UPSTREAM_TIMEOUT", "30")

    settings = Settings(_env_file=None)

    assert settings.chat_vendor == "openai"
    assert settings.chat_api_key == "sk-env"
    assert settings.api_key_env == "OPENAI_API_KEY"
    assert settings.upstream_timeout == 30.0


def test_gemini_key_selected_for_gemini_vendor(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "gm-env")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

    settings = Settings(_env_file=None, chat_vendor="gemini")

    assert settings.chat_api_key == "gm-env"
    assert settings.api_key_env == "GEMINI_API_KEY"


def test_unknown_vendor_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, chat_vendor="anthropic")
