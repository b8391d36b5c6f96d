"""Factory for creating agents with consistent model configuration."""

from typing import Any

from agents.extensions.models.litellm_model import LitellmModel

from agents import Agent
from src.common.model_identifier import ModelIdentifier

# Mapping of model identifiers to LiteLLM model strings
LITELLM_MODEL_MAP: dict[ModelIdentifier, str] = {
    ModelIdentifier.GEMINI_1_5_FLASH: "gemini/gemini-1.5-flash",
    ModelIdentifier.GEMINI_2_0_PRO: "gemini/gemini-2.0-pro",
}


def resolve_model(
    model_identifier: ModelIdentifier,
    api_key: str,
) -> LitellmModel:
    """Resolve a model identifier to an agent-compatible model.

    Args:
        model_identifier: The model identifier to resolve.
        api_key: Credential handed to LiteLLM for this model only.

    Returns:
        A LitellmModel bound to the credential.
    """
    return LitellmModel(model=LITELLM_MODEL_MAP[model_identifier], api_key=api_key)


def create_agent(
    *,
    name: str,
    model_identifier: ModelIdentifier,
    api_key: str,
    instructions: str | None = None,
) -> Agent[Any]:
    """Create an agent with consistent model configuration.

    Args:
        name: The name of the agent.
        model_identifier: The model to use for the agent.
        api_key: Backend credential.
        instructions: Optional system instructions. Prompts built by
            PromptBuilder already carry their own preamble.

    Returns:
        A configured Agent instance.
    """
    model = resolve_model(model_identifier, api_key)

    return Agent(name=name, instructions=instructions, model=model)
