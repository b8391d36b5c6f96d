"""Edit target schemas."""

from enum import StrEnum, auto

from pydantic import Field

from src.common.base_copilot_model import BaseCopilotModel
from src.edit_plan.schemas.segment import Segment

DEFAULT_MAX_SECONDS = 60.0


class Goal(StrEnum):
    """What kind of edit the editor is after."""

    SHORTS = auto()
    FULL = auto()


class TargetSpec(BaseCopilotModel):
    """Goal of an edit plan request.

    For shorts the total cut duration is meant to stay within max_seconds.
    The prompt asks the model for this; it is reported, not enforced.
    """

    goal: Goal
    """shorts for a short-form cut, full for a full-length edit."""

    max_seconds: float = Field(default=DEFAULT_MAX_SECONDS, gt=0, strict=True)
    """Upper bound on the total cut duration for shorts."""


class SegmentBatch(BaseCopilotModel):
    """Segments plus the target they should be edited towards."""

    segments: list[Segment]
    target: TargetSpec
