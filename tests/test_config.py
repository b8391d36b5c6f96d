"""Tests for configuration loading."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from src.common.config import DEFAULT_MAX_SEGMENT_CHARS, CopilotConfig, get_copilot_config
from src.common.errors import ConfigError
from src.common.model_identifier import ModelIdentifier

ENV_VARS = (
    "GEMINI_API_KEY",
    "gemini_api_key",
    "COPILOT_CHAT_MODEL",
    "COPILOT_TOOL_MODEL",
    "COPILOT_MAX_SEGMENT_CHARS",
    "HOST",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = get_copilot_config()

    assert not config.has_api_key
    assert config.chat_model == ModelIdentifier.GEMINI_1_5_FLASH
    assert config.tool_model == ModelIdentifier.GEMINI_2_0_PRO
    assert config.max_segment_chars == DEFAULT_MAX_SEGMENT_CHARS


def test_reads_credential_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "  secret  ")
    monkeypatch.setenv("COPILOT_CHAT_MODEL", "gemini-2.0-pro")
    monkeypatch.setenv("COPILOT_MAX_SEGMENT_CHARS", "5000")
    monkeypatch.setenv("PORT", "9000")

    config = get_copilot_config()

    assert config.require_api_key() == "secret"
    assert config.chat_model == ModelIdentifier.GEMINI_2_0_PRO
    assert config.max_segment_chars == 5000
    assert config.port == 9000


def test_lowercase_credential_name_is_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("gemini_api_key", "secret")

    assert get_copilot_config().has_api_key


def test_credential_is_not_exposed_in_repr() -> None:
    config = CopilotConfig(gemini_api_key=SecretStr("secret"))

    assert "secret" not in repr(config)


def test_blank_credential_counts_as_missing() -> None:
    config = CopilotConfig(gemini_api_key=SecretStr("   "))

    with pytest.raises(ConfigError, match="Missing GEMINI_API_KEY"):
        config.require_api_key()


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("COPILOT_TOOL_MODEL", "gpt-4o"),
        ("COPILOT_MAX_SEGMENT_CHARS", "lots"),
        ("COPILOT_MAX_SEGMENT_CHARS", "0"),
    ],
)
def test_invalid_settings_raise_config_error(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError):
        get_copilot_config()
