"""EditPlan service composing prompt building, generation and validation."""

import logging
from collections.abc import Sequence

from src.edit_plan.schemas import ParsedPlan, Segment, TargetSpec, ToolResult
from src.edit_plan.validator import EditPlanValidator
from src.model_invoker import ModelInvoker
from src.prompt_builder.service import PromptBuilder

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_MAX_TOKENS = 256


class EditPlanService:
    """Service behind the propose_edits and summarize_segments tools."""

    def __init__(
        self,
        invoker: ModelInvoker,
        prompt_builder: PromptBuilder | None = None,
        validator: EditPlanValidator | None = None,
    ) -> None:
        """Initialize the service."""
        self._invoker = invoker
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._validator = validator or EditPlanValidator()

    async def propose_edits(
        self,
        segments: Sequence[Segment],
        target: TargetSpec,
    ) -> ToolResult:
        """Ask the model for an edit plan and validate it.

        Args:
            segments: Transcript segments to plan over.
            target: Goal and duration cap.

        Returns:
            A ParsedPlan or, when the model output does not parse, a
            RawTextDiagnostic. Backend failures raise BackendError.
        """
        prompt = self._prompt_builder.build_edit_plan_prompt(segments, target)
        if prompt.truncated:
            logger.warning(
                "[tool=propose_edits] Segment batch truncated (%d segments)",
                len(segments),
            )

        raw_text = (await self._invoker.generate(prompt.text)).strip()
        result = self._validator.validate(raw_text, target)

        if not isinstance(result, ParsedPlan):
            logger.warning("[tool=propose_edits] Returning diagnostic: %s", result.reason)
            return result

        logger.info(
            "[tool=propose_edits] Plan with %d cuts (%.1fs), dropped %d",
            len(result.plan.cuts),
            result.report.total_cut_seconds,
            result.report.dropped_cuts,
        )
        if prompt.truncated:
            report = result.report.model_copy(update={"segments_truncated": True})
            result = result.model_copy(update={"report": report})

        return result

    async def summarize_segments(
        self,
        segments: Sequence[Segment],
        max_tokens: int = DEFAULT_SUMMARY_MAX_TOKENS,
    ) -> str:
        """Ask the model for a short free-text summary of the segments."""
        prompt = self._prompt_builder.build_summary_prompt(segments, max_tokens)
        if prompt.truncated:
            logger.warning(
                "[tool=summarize_segments] Segment batch truncated (%d segments)",
                len(segments),
            )
        return (await self._invoker.generate(prompt.text)).strip()
