"""Lookup tables from abstract roles to concrete n8n node types.

Trigger kinds are matched exactly, integration names case-insensitively.
Unknown keys never raise: they resolve to the neutral default of their role
(a manual trigger, a plain HTTP request).
"""

AI_AGENT_TYPE = "@n8n/n8n-nodes-langchain.agent"

DEFAULT_TRIGGER_TYPE = "n8n-nodes-base.manualTrigger"
DEFAULT_INTEGRATION_TYPE = "n8n-nodes-base.httpRequest"

TRIGGER_TYPES: dict[str, str] = {
    "webhook": "n8n-nodes-base.webhook",
    "schedule": "n8n-nodes-base.scheduleTrigger",
    "manual": DEFAULT_TRIGGER_TYPE,
    "chat": "@n8n/n8n-nodes-langchain.chatTrigger",
}

INTEGRATION_TYPES: dict[str, str] = {
    "slack": "n8n-nodes-base.slack",
    "telegram": "n8n-nodes-base.telegram",
    "email": "n8n-nodes-base.emailSend",
    "openai": "@n8n/n8n-nodes-langchain.lmChatOpenAi",
    "supabase": "@n8n/n8n-nodes-langchain.supabaseVectorStore",
    "http": DEFAULT_INTEGRATION_TYPE,
}


def resolve_trigger_type(kind: str) -> str:
    """Map a trigger kind (webhook, schedule, manual, chat) to its node type."""
    return TRIGGER_TYPES.get(kind, DEFAULT_TRIGGER_TYPE)


def resolve_integration_type(kind: str) -> str:
    """Map an integration name such as "Slack" or "openai" to its node type."""
    return INTEGRATION_TYPES.get(kind.lower(), DEFAULT_INTEGRATION_TYPE)


__all__ = [
    "AI_AGENT_TYPE",
    "DEFAULT_INTEGRATION_TYPE",
    "DEFAULT_TRIGGER_TYPE",
    "INTEGRATION_TYPES",
    "TRIGGER_TYPES",
    "resolve_integration_type",
    "resolve_trigger_type",
]
