from pydantic import BaseModel, ConfigDict


class BaseCopilotModel(BaseModel):
    """Base Pydantic model for the copilot.

    Schemas are immutable values: requests, prompts and validated plans are
    passed between services and tool calls, never edited in place.

    Attribute docstrings become field descriptions, so models used as MCP tool
    arguments publish them in the tool's input schema.
    """

    model_config = ConfigDict(
        frozen=True,
        revalidate_instances="always",
        validate_assignment=True,
        populate_by_name=True,
        use_attribute_docstrings=True,
        # NaN and Infinity have no JSON form
        allow_inf_nan=False,
    )
