"""API request schemas."""

from pydantic import Field

from src.chat.schemas import ChatTurn
from src.common.base_copilot_model import BaseCopilotModel


class ChatRequest(BaseCopilotModel):
    """Request for a chat reply to the latest turn."""

    messages: list[ChatTurn] = Field(min_length=1)
