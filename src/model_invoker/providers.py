"""Providers for the model invoker."""

from functools import cache

from src.common.config import CopilotConfig
from src.common.model_identifier import ModelIdentifier
from src.model_invoker.service import ModelInvoker


@cache
def model_invoker(
    config: CopilotConfig,
    model_identifier: ModelIdentifier | None = None,
) -> ModelInvoker:
    """Provide a cached ModelInvoker per config and model.

    Invokers hold no per-request state, so concurrent requests can share one.
    Raises ConfigError (and caches nothing) when the credential is missing.
    """
    return ModelInvoker(config, model_identifier)
