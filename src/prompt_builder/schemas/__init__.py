"""Prompt builder schemas."""

from src.prompt_builder.schemas.instructions import (
    CHAT_OUTPUT_STYLE,
    CHAT_PERSONA,
    CHAT_STREAM_OUTPUT_STYLE,
    CHAT_STREAM_PERSONA,
    EDIT_PLAN_INSTRUCTIONS,
    REPLY_LANGUAGE,
    SUMMARY_INSTRUCTIONS,
)
from src.prompt_builder.schemas.prompt import BuiltPrompt, PromptMode

__all__ = [
    "BuiltPrompt",
    "CHAT_OUTPUT_STYLE",
    "CHAT_PERSONA",
    "CHAT_STREAM_OUTPUT_STYLE",
    "CHAT_STREAM_PERSONA",
    "EDIT_PLAN_INSTRUCTIONS",
    "PromptMode",
    "REPLY_LANGUAGE",
    "SUMMARY_INSTRUCTIONS",
]
