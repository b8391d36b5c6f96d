"""MCP tool server exposing the edit plan tools over stdio."""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from src.edit_plan.schemas import DEFAULT_MAX_SECONDS, Goal, Segment, TargetSpec
from src.edit_plan.service import DEFAULT_SUMMARY_MAX_TOKENS, EditPlanService

logger = logging.getLogger(__name__)

SERVER_NAME = "video-editing-copilot"

SERVER_INSTRUCTIONS = """\
Tools for planning video edits from timestamped transcript segments. \
propose_edits returns an edit plan as JSON, or a payload starting with \
"Model did not return valid JSON:" when the model output could not be parsed."""


def create_tool_server(service: EditPlanService) -> FastMCP:
    """Create the MCP server with its tools bound to a service.

    Tool arguments are validated against the annotated types before a tool
    body runs; invalid calls never reach the model.
    """
    server = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)

    @server.tool(name="propose_edits", title="Propose Edits")
    async def propose_edits(
        segments: list[Segment],
        goal: Goal,
        max_seconds: Annotated[float, Field(gt=0, strict=True)] = DEFAULT_MAX_SECONDS,
    ) -> str:
        """Generate an edit plan JSON (cuts, subtitles, color) from timestamped transcript segments."""
        logger.info(
            "[tool=propose_edits] %d segments, goal=%s, max_seconds=%g",
            len(segments),
            goal,
            max_seconds,
        )
        target = TargetSpec(goal=goal, max_seconds=max_seconds)
        result = await service.propose_edits(segments, target)
        return result.to_payload_text()

    @server.tool(name="summarize_segments", title="Summarize Segments")
    async def summarize_segments(
        segments: list[Segment],
        max_tokens: Annotated[int, Field(gt=0, strict=True)] = DEFAULT_SUMMARY_MAX_TOKENS,
    ) -> str:
        """Summarize transcript segments as short bullet points for an editor."""
        logger.info(
            "[tool=summarize_segments] %d segments, max_tokens=%d",
            len(segments),
            max_tokens,
        )
        return await service.summarize_segments(segments, max_tokens)

    return server
