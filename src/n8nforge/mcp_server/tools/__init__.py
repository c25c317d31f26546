"""MCP tools for n8nforge.

This module automatically imports all tool modules to register them
with the FastMCP server instance via decorators.
"""

from . import generator_tools, rag_tools

__all__ = ["generator_tools", "rag_tools"]
