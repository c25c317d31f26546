"""Complete workflow generation tool for the MCP server."""

import asyncio
import logging
from typing import Annotated, Literal

from pydantic import Field

from ..server import mcp
from ..services.generator_service import GeneratorService
from ..utils.errors import ToolCallResult, tool_text

logger = logging.getLogger(__name__)


@mcp.tool(name="generate_complete_workflow")
async def generate_complete_workflow(
    description: Annotated[str, Field(description="Detailed description of what the workflow should do")],
    features: Annotated[
        list[str],
        Field(description="List of required features/integrations (e.g., whatsapp, linkedin, ai-agent)"),
    ],
    useTaskManager: Annotated[  # noqa: N803
        bool, Field(description="Whether to use Task Manager pattern for microservices")
    ] = False,
    outputFormat: Annotated[  # noqa: N803
        Literal["single", "microservices"],
        Field(description="Output as single workflow or multiple microservice workflows"),
    ] = "single",
    complexity: Annotated[
        Literal["simple", "intermediate", "advanced"], Field(description="Desired complexity level")
    ] = "intermediate",
) -> str:
    """Generate a complete n8n workflow implementation based on requirements.

    This tool:
    1. Searches RAG for relevant workflows and nodes
    2. Includes microservice and Task Manager examples when requested
    3. Builds a comprehensive prompt for an LLM
    4. Returns an implementation plan with ordered steps

    Use this when you need to create complex workflows with specific
    integrations like WhatsApp, LinkedIn, etc.

    Returns:
        JSON with success, plan, prompt (full generation prompt) and instructions
    """
    logger.debug(f"generate_complete_workflow called: features={features}, outputFormat={outputFormat}")

    def _sync_generate() -> ToolCallResult:
        """Synchronous generation operation."""
        return GeneratorService.generate_complete_workflow(
            description,
            features,
            use_task_manager=useTaskManager,
            output_format=outputFormat,
            complexity=complexity,
        )

    result = await asyncio.to_thread(_sync_generate)
    return tool_text(result)


__all__ = ["generate_complete_workflow"]
