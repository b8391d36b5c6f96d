"""EditPlanValidator: checks raw model text against the edit plan contract."""

import json
import logging
import math
import re
import sys
from typing import Any

from src.edit_plan.schemas import (
    Cut,
    EditPlan,
    Goal,
    ParsedPlan,
    RawTextDiagnostic,
    TargetSpec,
    ToolResult,
    ValidationReport,
)

logger = logging.getLogger(__name__)

# A single ```json ... ``` wrapper around the whole reply
_CODE_FENCE = re.compile(r"^```[a-zA-Z0-9_-]*\s*\n(?P<body>.*)\n\s*```$", re.DOTALL)


class EditPlanValidator:
    """Validates model output as an edit plan.

    Never raises on bad model output: anything that is not a JSON object
    comes back as a RawTextDiagnostic carrying the text verbatim.
    """

    def validate(self, raw_text: str, target: TargetSpec | None = None) -> ToolResult:
        """Parse and filter raw model text.

        Args:
            raw_text: The model response, unmodified.
            target: The requested target, used only for reporting whether the
                cuts fit within max_seconds. Not enforced.

        Returns:
            A ParsedPlan with invalid cuts dropped, or a RawTextDiagnostic.
        """
        try:
            document = json.loads(
                _strip_code_fence(raw_text.strip()),
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except (ValueError, RecursionError) as e:
            logger.info("[validator] Model output is not JSON: %s", e)
            return RawTextDiagnostic(raw_text=raw_text, reason=f"invalid JSON: {e}")

        if not isinstance(document, dict):
            kind = type(document).__name__
            logger.info("[validator] Model output is JSON %s, not an object", kind)
            return RawTextDiagnostic(
                raw_text=raw_text,
                reason=f"expected a JSON object, got {kind}",
            )

        edits = document.get("edits")
        if not isinstance(edits, dict):
            edits = {}

        raw_cuts = edits.get("cuts")
        if not isinstance(raw_cuts, list):
            raw_cuts = []

        kept_cuts = [entry for entry in raw_cuts if _is_valid_interval(entry)]
        raw_subtitles = edits.get("subtitles")
        subtitles = raw_subtitles if isinstance(raw_subtitles, list) else []

        plan = EditPlan(
            cuts=[Cut(start=entry["start"], end=entry["end"]) for entry in kept_cuts],
            subtitles=subtitles,
            color_preset=_color_preset(edits),
        )

        document = {**document, "edits": {**edits, "cuts": kept_cuts}}
        report = self._build_report(
            plan,
            dropped_cuts=len(raw_cuts) - len(kept_cuts),
            invalid_subtitles=sum(1 for s in subtitles if not _is_valid_interval(s)),
            target=target,
        )

        if report.dropped_cuts:
            logger.info("[validator] Dropped %d invalid cuts", report.dropped_cuts)

        return ParsedPlan(document=document, plan=plan, report=report)

    def _build_report(
        self,
        plan: EditPlan,
        dropped_cuts: int,
        invalid_subtitles: int,
        target: TargetSpec | None,
    ) -> ValidationReport:
        """Summarize what was dropped and how the plan compares to the target."""
        # Saturate so absurd timestamps cannot overflow the report to inf
        total = min(plan.total_cut_seconds, sys.float_info.max)
        max_seconds: float | None = None
        within: bool | None = None
        if target is not None and target.goal == Goal.SHORTS:
            max_seconds = target.max_seconds
            within = total <= target.max_seconds

        return ValidationReport(
            dropped_cuts=dropped_cuts,
            total_cut_seconds=total,
            max_seconds=max_seconds,
            within_max_seconds=within,
            invalid_subtitles=invalid_subtitles,
        )


def _strip_code_fence(text: str) -> str:
    match = _CODE_FENCE.match(text)
    return match.group("body") if match else text


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON, whatever Python's parser allows
    msg = f"non-standard JSON constant {name}"
    raise ValueError(msg)


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        msg = f"number out of range: {text}"
        raise ValueError(msg)
    return value


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _is_valid_interval(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    start, end = entry.get("start"), entry.get("end")
    # Compare as the floats Cut will store; distinct huge ints can collapse
    return _is_number(start) and _is_number(end) and float(start) < float(end)


def _color_preset(edits: dict[str, Any]) -> str | None:
    color = edits.get("color")
    if isinstance(color, dict) and isinstance(color.get("preset"), str):
        return color["preset"]
    return None
