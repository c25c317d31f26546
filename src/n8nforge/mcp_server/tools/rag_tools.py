"""RAG tools for the MCP server.

These tools search example workflows, summarize insights for a use case and
draft workflow structures from retrieved context. Parameter names follow the
camelCase tool schema.
"""

import asyncio
import logging
from typing import Annotated, Optional

from pydantic import Field

from n8nforge.planning.ir_models import Requirements

from ..server import mcp
from ..services.rag_service import RagService
from ..utils.errors import ToolCallResult, tool_text

logger = logging.getLogger(__name__)


@mcp.tool(name="rag_search_workflows")
async def rag_search_workflows(
    query: Annotated[
        str, Field(description='Natural language query to search for workflows (e.g., "AI chatbot with memory")')
    ],
    limit: Annotated[int, Field(description="Maximum number of results to return", ge=1)] = 5,
    threshold: Annotated[
        float, Field(description="Similarity threshold (0.0-1.0). Lower values return more results.", ge=0, le=1)
    ] = 0.5,
    includeNodes: Annotated[bool, Field(description="Include suggested nodes in the response")] = False,  # noqa: N803
) -> str:
    """Search for workflows using semantic similarity.

    Find workflows based on natural language descriptions.

    Examples:
        query="Telegram bot that answers questions from a knowledge base"
        query="Post new RSS items to Slack", limit=3, includeNodes=true

    Returns:
        JSON with workflowMatches (name, description, similarity, id,
        complexity, patterns, tags), optional suggestedNodes and totalMatches
    """
    logger.debug(f"rag_search_workflows called with query: {query}")

    def _sync_search() -> ToolCallResult:
        """Synchronous search operation."""
        return RagService.search_workflows(query, limit=limit, threshold=threshold, include_nodes=includeNodes)

    # Run in thread pool to avoid blocking
    result = await asyncio.to_thread(_sync_search)
    return tool_text(result)


@mcp.tool(name="rag_get_insights")
async def rag_get_insights(
    query: Annotated[
        str, Field(description="Natural language description of what you want to build or analyze")
    ],
) -> str:
    """Get comprehensive insights about available workflows and nodes for a given use case or requirement.

    Returns:
        JSON with a summary, workflow matches, node suggestions, recommended
        patterns, a complexity estimate and an implementation section
        (suggestedApproach, keyComponents, considerations)
    """
    logger.debug(f"rag_get_insights called with query: {query}")

    def _sync_insights() -> ToolCallResult:
        """Synchronous insights operation."""
        return RagService.get_insights(query)

    result = await asyncio.to_thread(_sync_insights)
    return tool_text(result)


@mcp.tool(name="rag_generate_workflow")
async def rag_generate_workflow(
    description: Annotated[str, Field(description="Natural language description of the workflow to generate")],
    requirements: Annotated[
        Optional[Requirements],
        Field(
            description="Specific requirements: trigger (webhook, schedule, manual, chat), integrations "
            "(e.g., slack, telegram, openai), complexity (simple, intermediate, advanced), patterns "
            "(microservice, ai_agent, rag, ...)"
        ),
    ] = None,
    examplesLimit: Annotated[  # noqa: N803
        int, Field(description="Number of example workflows to use for context", ge=1)
    ] = 3,
) -> str:
    """Generate a workflow structure based on description and requirements using RAG context from existing workflows.

    The draft is a linear chain: trigger, optional AI agent, one node per
    requested integration, then up to three suggested nodes.

    Returns:
        JSON with the retrieved context, generatedStructure (nodes,
        connections, settings), implementationSteps and notes
    """
    logger.debug(f"rag_generate_workflow called with description: {description[:100]}")
    requirements_dict = requirements.model_dump(exclude_unset=True) if requirements is not None else None

    def _sync_generate() -> ToolCallResult:
        """Synchronous drafting operation."""
        return RagService.generate_workflow(description, requirements_dict, examples_limit=examplesLimit)

    result = await asyncio.to_thread(_sync_generate)
    return tool_text(result)


__all__ = ["rag_generate_workflow", "rag_get_insights", "rag_search_workflows"]
