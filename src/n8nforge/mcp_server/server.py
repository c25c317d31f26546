"""FastMCP server instance for n8nforge.

This module creates the central FastMCP server instance that all tools
register with via decorators.
"""

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    "n8nforge",
    instructions="""Tools for drafting n8n workflows from natural language.

RECOMMENDED SEQUENCE:
1. rag_get_insights → understand what existing workflows and nodes cover the request
2. rag_search_workflows → inspect the closest workflows (includeNodes=true for node suggestions)
3. rag_generate_workflow → get a draft node graph with implementation steps
4. generate_complete_workflow → get a full generation prompt and plan, then write the workflow JSON

All tools return JSON text. Failures are returned as error results with an
"error" message and a "kind" tag (retrieval_unavailable, malformed_input,
resource_missing).""",
)


def register_tools() -> None:
    """Import all tool modules to register them with the server.

    This function is called during server startup to ensure all tools
    are registered before the server starts handling requests.
    """
    # Import tool modules to trigger @mcp.tool() decorators
    from .tools import generator_tools, rag_tools

    # Explicitly reference the modules to satisfy ruff F401
    _ = (generator_tools, rag_tools)


__all__ = ["mcp", "register_tools"]
