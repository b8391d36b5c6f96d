"""Providers for the chat service."""

from functools import cache

from src.chat.service import ChatService
from src.common.config import CopilotConfig
from src.model_invoker.providers import model_invoker
from src.prompt_builder.service import PromptBuilder


@cache
def chat_service(config: CopilotConfig) -> ChatService:
    """Provide a cached ChatService using the chat model.

    Raises ConfigError when the credential is missing.
    """
    return ChatService(
        invoker=model_invoker(config, config.chat_model),
        prompt_builder=PromptBuilder(config.max_segment_chars),
    )
