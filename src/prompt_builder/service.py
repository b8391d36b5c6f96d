"""PromptBuilder service for turning requests into model prompts."""

import json
from collections.abc import Sequence

from src.chat.schemas import ChatTurn, Role
from src.common.config import DEFAULT_MAX_SEGMENT_CHARS
from src.common.errors import InputShapeError
from src.edit_plan.schemas import Segment, SegmentBatch, TargetSpec
from src.prompt_builder.schemas import (
    CHAT_OUTPUT_STYLE,
    CHAT_PERSONA,
    CHAT_STREAM_OUTPUT_STYLE,
    CHAT_STREAM_PERSONA,
    EDIT_PLAN_INSTRUCTIONS,
    SUMMARY_INSTRUCTIONS,
    BuiltPrompt,
    PromptMode,
)
from src.prompt_builder.schemas.instructions import (
    CHAT_HISTORY_HEADER,
    CHAT_LATEST_HEADER,
    CHAT_SEPARATOR,
)

ROLE_LABELS: dict[Role, str] = {
    Role.USER: "User",
    Role.ASSISTANT: "AI",
}


class PromptBuilder:
    """Builds deterministic prompt strings.

    Pure: the same inputs always give the same prompt, and nothing here
    touches the network or the filesystem.
    """

    def __init__(self, max_segment_chars: int = DEFAULT_MAX_SEGMENT_CHARS) -> None:
        """Initialize the prompt builder.

        Args:
            max_segment_chars: Upper bound on the serialized segment batch.
        """
        self._max_segment_chars = max_segment_chars

    def build(
        self,
        history: Sequence[ChatTurn],
        current: ChatTurn | SegmentBatch,
        mode: PromptMode,
    ) -> BuiltPrompt:
        """Build a prompt for either request shape.

        Args:
            history: Prior turns, oldest first. Ignored in edit plan mode.
            current: The latest turn (chat) or the segment batch (edit plan).
            mode: Which request shape to build for.

        Returns:
            The prompt, flagged if the segment batch had to be truncated.
        """
        if mode in (PromptMode.CHAT, PromptMode.CHAT_STREAM):
            if not isinstance(current, ChatTurn):
                msg = "chat prompts need a chat turn as the current request"
                raise InputShapeError(msg)
            return self.build_chat_prompt(
                [*history, current],
                streaming=mode == PromptMode.CHAT_STREAM,
            )

        if not isinstance(current, SegmentBatch):
            msg = "edit plan prompts need a segment batch as the current request"
            raise InputShapeError(msg)
        return self.build_edit_plan_prompt(current.segments, current.target)

    def build_chat_prompt(
        self,
        messages: Sequence[ChatTurn],
        streaming: bool = False,
    ) -> BuiltPrompt:
        """Build the conversational prompt from the full turn list.

        The last turn is the request; everything before it is rendered as a
        role-labelled transcript. Streamed replies get their own persona and
        output style, asking for step-by-step candidates.
        """
        if not messages:
            msg = "messages must not be empty"
            raise InputShapeError(msg)

        *earlier, latest = messages
        history_text = "\n".join(
            f"{ROLE_LABELS[turn.role]}: {turn.content}" for turn in earlier
        )

        persona = CHAT_STREAM_PERSONA if streaming else CHAT_PERSONA
        output_style = CHAT_STREAM_OUTPUT_STYLE if streaming else CHAT_OUTPUT_STYLE

        text = (
            f"{persona}\n"
            f"{CHAT_HISTORY_HEADER}\n"
            f"{history_text}\n"
            f"{CHAT_SEPARATOR}\n"
            f"{CHAT_LATEST_HEADER}\n"
            f"{latest.content}\n\n"
            f"{output_style}"
        )
        return BuiltPrompt(text=text)

    def build_edit_plan_prompt(
        self,
        segments: Sequence[Segment],
        target: TargetSpec,
    ) -> BuiltPrompt:
        """Build the strict-JSON edit plan prompt."""
        serialized, truncated = self._serialize_segments(segments)

        lines = [
            f"segments = {serialized}",
            f'goal = "{target.goal}"',
            f"max_seconds = {target.max_seconds:g}",
        ]
        if truncated:
            lines.append("segments_truncated = true")

        text = EDIT_PLAN_INSTRUCTIONS + "\n\n" + "\n".join(lines)
        return BuiltPrompt(text=text, truncated=truncated)

    def build_summary_prompt(
        self,
        segments: Sequence[Segment],
        max_tokens: int,
    ) -> BuiltPrompt:
        """Build the free-text summary prompt with a token budget hint."""
        serialized, truncated = self._serialize_segments(segments)
        text = SUMMARY_INSTRUCTIONS.format(max_tokens=max_tokens) + "\n" + serialized
        return BuiltPrompt(text=text, truncated=truncated)

    def _serialize_segments(self, segments: Sequence[Segment]) -> tuple[str, bool]:
        """Serialize segments as compact JSON, cut to the length bound."""
        serialized = json.dumps(
            [segment.model_dump(exclude_none=True) for segment in segments],
            ensure_ascii=False,
            separators=(",", ":"),
        )
        if len(serialized) <= self._max_segment_chars:
            return serialized, False
        return serialized[: self._max_segment_chars], True
