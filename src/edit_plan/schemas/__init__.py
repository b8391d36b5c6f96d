"""Edit plan schemas."""

from src.edit_plan.schemas.edit_plan import (
    NON_JSON_LABEL,
    Cut,
    EditPlan,
    ParsedPlan,
    RawTextDiagnostic,
    ToolResult,
    ValidationReport,
)
from src.edit_plan.schemas.segment import Segment
from src.edit_plan.schemas.target import (
    DEFAULT_MAX_SECONDS,
    Goal,
    SegmentBatch,
    TargetSpec,
)

__all__ = [
    "Cut",
    "DEFAULT_MAX_SECONDS",
    "EditPlan",
    "Goal",
    "NON_JSON_LABEL",
    "ParsedPlan",
    "RawTextDiagnostic",
    "Segment",
    "SegmentBatch",
    "TargetSpec",
    "ToolResult",
    "ValidationReport",
]
