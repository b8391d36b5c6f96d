"""Copilot configuration and backend credential settings."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import SecretStr

from src.common.base_copilot_model import BaseCopilotModel
from src.common.errors import ConfigError
from src.common.model_identifier import ModelIdentifier

# Load .env files from the project root
_project_dir = Path(__file__).parent.parent.parent
load_dotenv(_project_dir / ".env")
load_dotenv(_project_dir / ".env.local")

DEFAULT_MAX_SEGMENT_CHARS = 20000


class CopilotConfig(BaseCopilotModel):
    """Configuration for the generative backend.

    Built once at startup and passed explicitly to whatever needs it.
    """

    gemini_api_key: SecretStr | None = None

    # Fast model for conversation, stronger model for structured tools
    chat_model: ModelIdentifier = ModelIdentifier.GEMINI_1_5_FLASH
    tool_model: ModelIdentifier = ModelIdentifier.GEMINI_2_0_PRO

    # Upper bound on the serialized segment batch embedded in a prompt
    max_segment_chars: int = DEFAULT_MAX_SEGMENT_CHARS

    # HTTP server bind address
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def has_api_key(self) -> bool:
        """Whether a non-blank credential is configured."""
        return bool(self._api_key_value())

    def require_api_key(self) -> str:
        """Return the credential, or raise ConfigError if it is absent."""
        api_key = self._api_key_value()
        if not api_key:
            msg = "Missing GEMINI_API_KEY"
            raise ConfigError(msg)
        return api_key

    def _api_key_value(self) -> str:
        if self.gemini_api_key is None:
            return ""
        return self.gemini_api_key.get_secret_value().strip()


def _model_from_env(name: str, default: ModelIdentifier) -> ModelIdentifier:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return ModelIdentifier(value)
    except ValueError as e:
        valid = ", ".join(m.value for m in ModelIdentifier)
        msg = f"{name}={value!r} is not a supported model. Valid options: {valid}"
        raise ConfigError(msg) from e


def get_copilot_config() -> CopilotConfig:
    """Get copilot configuration from environment variables.

    A missing credential is not an error here: the tool server treats it as
    fatal, the HTTP routes fail each request instead.

    Environment variables:
        GEMINI_API_KEY: Backend credential (``gemini_api_key`` also accepted)
        COPILOT_CHAT_MODEL: Model for chat replies (default: gemini-1.5-flash)
        COPILOT_TOOL_MODEL: Model for tool calls (default: gemini-2.0-pro)
        COPILOT_MAX_SEGMENT_CHARS: Serialized segment bound (default: 20000)
        HOST, PORT: HTTP bind address (default: 127.0.0.1:8000)
    """
    api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("gemini_api_key")

    raw_max_chars = os.environ.get(
        "COPILOT_MAX_SEGMENT_CHARS", str(DEFAULT_MAX_SEGMENT_CHARS)
    )
    try:
        max_segment_chars = int(raw_max_chars)
    except ValueError as e:
        msg = f"COPILOT_MAX_SEGMENT_CHARS must be an integer, got {raw_max_chars!r}"
        raise ConfigError(msg) from e
    if max_segment_chars <= 0:
        msg = "COPILOT_MAX_SEGMENT_CHARS must be positive"
        raise ConfigError(msg)

    return CopilotConfig(
        gemini_api_key=SecretStr(api_key) if api_key else None,
        chat_model=_model_from_env("COPILOT_CHAT_MODEL", ModelIdentifier.GEMINI_1_5_FLASH),
        tool_model=_model_from_env("COPILOT_TOOL_MODEL", ModelIdentifier.GEMINI_2_0_PRO),
        max_segment_chars=max_segment_chars,
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
    )
