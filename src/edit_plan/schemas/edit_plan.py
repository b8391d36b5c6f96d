"""Edit plan schemas - the output contract of the edit planner."""

import json
from typing import Annotated, Any, Literal, Self

from pydantic import Field, model_validator

from src.common.base_copilot_model import BaseCopilotModel

NON_JSON_LABEL = "Model did not return valid JSON:\n"


class Cut(BaseCopilotModel):
    """A kept interval of the source, in seconds."""

    start: float
    end: float

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.start >= self.end:
            msg = f"cut start ({self.start}) must be less than end ({self.end})"
            raise ValueError(msg)
        return self

    @property
    def duration_seconds(self) -> float:
        """Length of the cut."""
        return self.end - self.start


class EditPlan(BaseCopilotModel):
    """Typed view of a validated plan.

    Only cuts are checked; subtitles and the color preset are passed through
    as the model produced them.
    """

    cuts: list[Cut]
    subtitles: list[Any] = Field(default_factory=list)
    color_preset: str | None = None

    @property
    def total_cut_seconds(self) -> float:
        """Sum of all cut durations."""
        return sum(cut.duration_seconds for cut in self.cuts)


class ValidationReport(BaseCopilotModel):
    """What the validator changed or noticed while checking a plan."""

    dropped_cuts: int = 0
    total_cut_seconds: float = 0.0
    # Set only for shorts targets; the aggregate cap is not enforced
    max_seconds: float | None = None
    within_max_seconds: bool | None = None
    # Subtitles are not filtered, only counted
    invalid_subtitles: int = 0
    segments_truncated: bool = False


class ParsedPlan(BaseCopilotModel):
    """The model returned JSON that could be checked as an edit plan."""

    kind: Literal["plan"] = "plan"
    # Parsed JSON with the filtered cut list, other fields untouched
    document: dict[str, Any]
    plan: EditPlan
    report: ValidationReport

    def to_payload_text(self) -> str:
        """Serialize as the tool response payload."""
        payload = {**self.document, "validation": self.report.model_dump(mode="json")}
        return json.dumps(payload, ensure_ascii=False, allow_nan=False)


class RawTextDiagnostic(BaseCopilotModel):
    """The model output could not be parsed; the raw text is kept verbatim."""

    kind: Literal["diagnostic"] = "diagnostic"
    raw_text: str
    reason: str

    def to_payload_text(self) -> str:
        """Serialize as the tool response payload, labelled as non-JSON."""
        return NON_JSON_LABEL + self.raw_text


ToolResult = Annotated[ParsedPlan | RawTextDiagnostic, Field(discriminator="kind")]
