"""Chat message schemas."""

from enum import StrEnum
from uuid import uuid4

from pydantic import Field

from src.common.base_copilot_model import BaseCopilotModel


class Role(StrEnum):
    """Who authored a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseCopilotModel):
    """A single role-labelled turn, as received on the HTTP surface."""

    role: Role
    content: str


class Message(ChatTurn):
    """A chat turn held by a session.

    Placeholders are assistant messages with ``pending=True`` that get
    replaced at the same position once the reply settles.
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    pending: bool = False
