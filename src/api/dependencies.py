"""FastAPI dependencies shared by the routes."""

from collections.abc import Callable

from fastapi import Depends, Request

from src.chat.providers import chat_service
from src.chat.service import ChatService
from src.common.config import CopilotConfig

ChatServiceFactory = Callable[[], ChatService]


def get_config(request: Request) -> CopilotConfig:
    """Config loaded once when the app was created."""
    return request.app.state.config


def get_chat_service_factory(
    config: CopilotConfig = Depends(get_config),
) -> ChatServiceFactory:
    """Defer building the chat service until the body has been validated.

    Building the service raises ConfigError without a credential; deferring it
    keeps malformed bodies a 400 whatever the credential state.
    """
    return lambda: chat_service(config)
