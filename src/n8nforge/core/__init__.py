"""Core n8nforge modules: errors, settings and node type tables."""

from .exceptions import ForgeError, MalformedInputError, ResourceMissingError, RetrievalUnavailableError
from .node_types import (
    AI_AGENT_TYPE,
    DEFAULT_INTEGRATION_TYPE,
    DEFAULT_TRIGGER_TYPE,
    resolve_integration_type,
    resolve_trigger_type,
)

__all__ = [
    "AI_AGENT_TYPE",
    "DEFAULT_INTEGRATION_TYPE",
    "DEFAULT_TRIGGER_TYPE",
    "ForgeError",
    "MalformedInputError",
    "ResourceMissingError",
    "RetrievalUnavailableError",
    "resolve_integration_type",
    "resolve_trigger_type",
]
