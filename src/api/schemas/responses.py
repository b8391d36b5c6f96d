"""API response schemas."""

from src.common.base_copilot_model import BaseCopilotModel


class ChatResponse(BaseCopilotModel):
    """Complete chat reply."""

    content: str


class ErrorResponse(BaseCopilotModel):
    """Error body for any failed request."""

    error: str
