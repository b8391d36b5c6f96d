"""Prompt builder output schemas."""

from enum import StrEnum, auto

from src.common.base_copilot_model import BaseCopilotModel


class PromptMode(StrEnum):
    """Request shape a prompt is built for."""

    CHAT = auto()
    CHAT_STREAM = auto()
    EDIT_PLAN = auto()


class BuiltPrompt(BaseCopilotModel):
    """A prompt ready for the model.

    ``truncated`` is set when the embedded segment batch was cut short, so a
    caller can tell a partial analysis from a complete one.
    """

    text: str
    truncated: bool = False
