"""Transcript segment schemas - the input of the edit planner."""

from typing import Self

from pydantic import Field, model_validator

from src.common.base_copilot_model import BaseCopilotModel


class Segment(BaseCopilotModel):
    """A timestamped transcript slice with optional text."""

    start: float = Field(ge=0, strict=True)
    """Start of the segment in seconds."""

    end: float = Field(strict=True)
    """End of the segment in seconds, after start."""

    text: str | None = None
    """Transcript text spoken in the segment, if any."""

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.end <= self.start:
            msg = f"segment end ({self.end}) must be greater than start ({self.start})"
            raise ValueError(msg)
        return self
