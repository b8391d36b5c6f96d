"""Chat service for conversational replies."""

import logging
from collections.abc import Sequence

from src.chat.schemas import ChatTurn
from src.model_invoker import FragmentStream, ModelInvoker
from src.prompt_builder.service import PromptBuilder

logger = logging.getLogger(__name__)


class ChatService:
    """Builds the chat prompt and sends it to the model."""

    def __init__(
        self,
        invoker: ModelInvoker,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        """Initialize the chat service."""
        self._invoker = invoker
        self._prompt_builder = prompt_builder or PromptBuilder()

    async def reply(self, messages: Sequence[ChatTurn]) -> str:
        """Return the complete reply to the latest turn.

        Raises:
            InputShapeError: If there are no messages.
            BackendError: If the backend call fails.
        """
        prompt = self._prompt_builder.build_chat_prompt(messages)
        logger.info("[chat] Buffered reply for %d turns", len(messages))
        return await self._invoker.generate(prompt.text)

    def stream_reply(self, messages: Sequence[ChatTurn]) -> FragmentStream:
        """Return the reply to the latest turn as a lazy fragment stream."""
        prompt = self._prompt_builder.build_chat_prompt(messages, streaming=True)
        logger.info("[chat] Streaming reply for %d turns", len(messages))
        return self._invoker.generate_stream(prompt.text)
