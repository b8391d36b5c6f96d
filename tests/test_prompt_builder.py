"""Tests for PromptBuilder."""

from __future__ import annotations

import json

import pytest

from src.chat.schemas import ChatTurn, Role
from src.common.errors import InputShapeError
from src.edit_plan.schemas import Goal, Segment, SegmentBatch, TargetSpec
from src.prompt_builder.schemas import (
    CHAT_OUTPUT_STYLE,
    CHAT_PERSONA,
    CHAT_STREAM_OUTPUT_STYLE,
    CHAT_STREAM_PERSONA,
    EDIT_PLAN_INSTRUCTIONS,
    PromptMode,
)
from src.prompt_builder.service import PromptBuilder


def _turns() -> list[ChatTurn]:
    return [
        ChatTurn(role=Role.USER, content="find the silent parts"),
        ChatTurn(role=Role.ASSISTANT, content="here are three"),
        ChatTurn(role=Role.USER, content="make a 60s short"),
    ]


def _segments() -> list[Segment]:
    return [
        Segment(start=0.0, end=5.0, text="a"),
        Segment(start=5.0, end=12.0, text="b"),
    ]


def test_chat_prompt_renders_history_then_latest() -> None:
    prompt = PromptBuilder().build_chat_prompt(_turns())

    assert prompt.truncated is False
    assert prompt.text.startswith(CHAT_PERSONA)
    assert prompt.text.endswith(CHAT_OUTPUT_STYLE)
    history, latest = prompt.text.split("\n---\n")
    assert "User: find the silent parts\nAI: here are three" in history
    assert "make a 60s short" not in history
    assert "make a 60s short" in latest


def test_chat_prompt_with_single_message_has_empty_history() -> None:
    prompt = PromptBuilder().build_chat_prompt([ChatTurn(role=Role.USER, content="hi")])

    history, latest = prompt.text.split("\n---\n")
    assert "User:" not in history
    assert "hi" in latest


def test_chat_prompt_is_deterministic() -> None:
    builder = PromptBuilder()
    assert builder.build_chat_prompt(_turns()) == builder.build_chat_prompt(_turns())


def test_chat_prompt_rejects_empty_history() -> None:
    with pytest.raises(InputShapeError):
        PromptBuilder().build_chat_prompt([])


def test_build_dispatches_chat_mode() -> None:
    turns = _turns()
    builder = PromptBuilder()

    built = builder.build(turns[:-1], turns[-1], PromptMode.CHAT)

    assert built == builder.build_chat_prompt(turns)


def test_streamed_chat_prompt_uses_its_own_persona_and_style() -> None:
    turns = _turns()
    builder = PromptBuilder()

    streamed = builder.build_chat_prompt(turns, streaming=True)

    assert streamed.text.startswith(CHAT_STREAM_PERSONA)
    assert streamed.text.endswith(CHAT_STREAM_OUTPUT_STYLE)
    assert CHAT_OUTPUT_STYLE not in streamed.text
    history, latest = streamed.text.split("\n---\n")
    assert "AI: here are three" in history
    assert "make a 60s short" in latest
    assert builder.build(turns[:-1], turns[-1], PromptMode.CHAT_STREAM) == streamed


def test_build_rejects_mismatched_request_shape() -> None:
    batch = SegmentBatch(segments=_segments(), target=TargetSpec(goal=Goal.FULL))
    builder = PromptBuilder()

    with pytest.raises(InputShapeError):
        builder.build([], batch, PromptMode.CHAT)
    with pytest.raises(InputShapeError):
        builder.build([], _turns()[0], PromptMode.EDIT_PLAN)


def test_edit_plan_prompt_embeds_schema_segments_and_target() -> None:
    batch = SegmentBatch(
        segments=_segments(),
        target=TargetSpec(goal=Goal.SHORTS, max_seconds=10),
    )

    prompt = PromptBuilder().build([], batch, PromptMode.EDIT_PLAN)

    assert prompt.truncated is False
    assert prompt.text.startswith(EDIT_PLAN_INSTRUCTIONS)
    lines = prompt.text.splitlines()
    segments_line = next(line for line in lines if line.startswith("segments = "))
    assert json.loads(segments_line.removeprefix("segments = ")) == [
        {"start": 0.0, "end": 5.0, "text": "a"},
        {"start": 5.0, "end": 12.0, "text": "b"},
    ]
    assert 'goal = "shorts"' in lines
    assert "max_seconds = 10" in lines
    assert "segments_truncated = true" not in lines


def test_edit_plan_prompt_omits_missing_text() -> None:
    prompt = PromptBuilder().build_edit_plan_prompt(
        [Segment(start=1.5, end=2.5)],
        TargetSpec(goal=Goal.FULL),
    )

    assert 'segments = [{"start":1.5,"end":2.5}]' in prompt.text
    assert "max_seconds = 60" in prompt.text


def test_edit_plan_prompt_flags_truncation() -> None:
    segments = [Segment(start=float(i), end=float(i + 1), text="word " * 20) for i in range(50)]
    builder = PromptBuilder(max_segment_chars=200)

    prompt = builder.build_edit_plan_prompt(segments, TargetSpec(goal=Goal.FULL))

    assert prompt.truncated is True
    assert "segments_truncated = true" in prompt.text.splitlines()
    segments_line = next(
        line for line in prompt.text.splitlines() if line.startswith("segments = ")
    )
    assert len(segments_line.removeprefix("segments = ")) == 200


def test_summary_prompt_includes_token_budget() -> None:
    prompt = PromptBuilder().build_summary_prompt(_segments(), max_tokens=128)

    assert "at most 128 tokens" in prompt.text
    assert prompt.text.endswith('[{"start":0.0,"end":5.0,"text":"a"},{"start":5.0,"end":12.0,"text":"b"}]')
    assert prompt.truncated is False
