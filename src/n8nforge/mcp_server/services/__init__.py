"""Service layer for MCP server.

This module provides stateless service wrappers that enforce
the fresh instance pattern for thread safety.
"""

from .base_service import BaseService
from .generator_service import GeneratorService
from .rag_service import RagService

__all__ = [
    "BaseService",
    "GeneratorService",
    "RagService",
]
