"""n8nforge MCP Server.

Exposes workflow search, insights, drafting and generation-prompt
preparation as MCP tools for AI agents.
"""

from .main import run_server

__all__ = ["run_server"]
