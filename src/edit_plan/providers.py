"""Providers for the edit plan service."""

from functools import cache

from src.common.config import CopilotConfig
from src.edit_plan.service import EditPlanService
from src.model_invoker.providers import model_invoker
from src.prompt_builder.service import PromptBuilder


@cache
def edit_plan_service(config: CopilotConfig) -> EditPlanService:
    """Provide a cached EditPlanService using the tool model."""
    return EditPlanService(
        invoker=model_invoker(config, config.tool_model),
        prompt_builder=PromptBuilder(config.max_segment_chars),
    )
