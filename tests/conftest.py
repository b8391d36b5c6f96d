"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from src.common.config import CopilotConfig


@pytest.fixture
def config() -> CopilotConfig:
    return CopilotConfig(gemini_api_key=SecretStr("test-key"))


@pytest.fixture
def config_without_key() -> CopilotConfig:
    return CopilotConfig()
