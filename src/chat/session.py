"""Client-side chat session state."""

import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum, auto

from src.chat.schemas import ChatTurn, Message, Role
from src.common.errors import SessionBusyError

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! Tell me what you want to edit or improve in your video. For example: "
    "'find the silent sections in this scene' or 'make a 60-second vertical highlight'."
)
PLACEHOLDER_TEXT = "Thinking..."

ReplyFn = Callable[[list[ChatTurn]], Awaitable[str]]


class SessionState(StrEnum):
    """Where a conversation is in its request cycle."""

    IDLE = auto()
    AWAITING_RESPONSE = auto()
    IDLE_WITH_ERROR = auto()


class ChatSessionController:
    """Ordered, append-only message list with a pending reply placeholder.

    Only one reply can be outstanding: submitting while a placeholder is
    pending raises SessionBusyError instead of queueing a second request.
    """

    def __init__(self, greeting: str | None = GREETING) -> None:
        """Initialize the session.

        Args:
            greeting: Opening assistant message, or None for an empty session.
        """
        self._messages: list[Message] = []
        self._state = SessionState.IDLE
        if greeting:
            self._messages.append(Message(role=Role.ASSISTANT, content=greeting))

    @property
    def messages(self) -> tuple[Message, ...]:
        """All messages in insertion order."""
        return tuple(self._messages)

    @property
    def state(self) -> SessionState:
        """Current state of the request cycle."""
        return self._state

    @property
    def can_submit(self) -> bool:
        """Whether a new message may be submitted."""
        return self._state != SessionState.AWAITING_RESPONSE

    def history(self) -> list[ChatTurn]:
        """Settled messages as plain turns, for sending to the backend."""
        return [
            ChatTurn(role=message.role, content=message.content)
            for message in self._messages
            if not message.pending
        ]

    def submit(self, text: str) -> str | None:
        """Append the user's message and a pending placeholder.

        Args:
            text: Raw input. Surrounding whitespace is trimmed.

        Returns:
            The placeholder id, or None if the input was blank.

        Raises:
            SessionBusyError: If a reply is still outstanding.
        """
        trimmed = text.strip()
        if not trimmed:
            return None
        if not self.can_submit:
            msg = "a reply is still pending"
            raise SessionBusyError(msg)

        placeholder = Message(role=Role.ASSISTANT, content=PLACEHOLDER_TEXT, pending=True)
        self._messages.append(Message(role=Role.USER, content=trimmed))
        self._messages.append(placeholder)
        self._state = SessionState.AWAITING_RESPONSE
        return placeholder.id

    def resolve(self, placeholder_id: str, content: str) -> Message:
        """Replace the placeholder with the real reply."""
        message = self._settle(placeholder_id, content)
        self._state = SessionState.IDLE
        return message

    def fail(self, placeholder_id: str, error: str) -> Message:
        """Replace the placeholder with an error message."""
        message = self._settle(placeholder_id, f"Error: {error}")
        self._state = SessionState.IDLE_WITH_ERROR
        return message

    async def send(self, text: str, reply: ReplyFn) -> Message | None:
        """Submit text, wait for the reply and settle the placeholder.

        Args:
            text: Raw user input.
            reply: Coroutine function taking the settled history and
                returning the assistant's reply.

        Returns:
            The settled assistant message, or None if the input was blank.
        """
        placeholder_id = self.submit(text)
        if placeholder_id is None:
            return None

        try:
            content = await reply(self.history())
        except Exception as e:
            logger.warning("[session] Reply failed: %s", e)
            return self.fail(placeholder_id, str(e) or type(e).__name__)
        return self.resolve(placeholder_id, content)

    def _settle(self, placeholder_id: str, content: str) -> Message:
        for index, message in enumerate(self._messages):
            if message.id != placeholder_id:
                continue
            if not message.pending:
                msg = f"message {placeholder_id} is already settled"
                raise ValueError(msg)
            settled = message.model_copy(update={"content": content, "pending": False})
            self._messages[index] = settled
            return settled

        msg = f"unknown placeholder {placeholder_id}"
        raise KeyError(msg)
