"""Chat schemas."""

from src.chat.schemas.message import ChatTurn, Message, Role

__all__ = [
    "ChatTurn",
    "Message",
    "Role",
]
