"""Draft workflow graph construction.

Builds a single linear chain of nodes from the requirements and the
retrieval context:

    trigger -> [AI agent] -> integrations... -> up to 3 suggested nodes

The builder is pure and total: no I/O, no randomness, and unknown trigger or
integration names degrade to the default node types instead of failing.
"""

import logging

from n8nforge.core.node_types import AI_AGENT_TYPE, resolve_integration_type, resolve_trigger_type
from n8nforge.planning.ir_models import (
    ConnectionEdge,
    NodeConnections,
    NodeSpec,
    Requirements,
    RetrievalContext,
    WorkflowDraft,
)

logger = logging.getLogger(__name__)

TRIGGER_ID = "trigger_1"
ORIGIN_X = 250
ORIGIN_Y = 300
NODE_SPACING = 200
MAX_SUGGESTED_NODES = 3


def infer_trigger(context: RetrievalContext) -> str:
    """Pick a trigger kind from the retrieved patterns."""
    if "microservice" in context.patterns:
        return "webhook"
    if "scheduled" in context.patterns:
        return "schedule"
    return "manual"


def wants_ai_agent(description: str, context: RetrievalContext) -> bool:
    """Whether the draft should route through an AI agent node.

    Matching on the description is a plain substring test, so any word
    containing "ai" (e.g. "email") also qualifies.
    """
    lowered = description.lower()
    return "ai_agent" in context.patterns or "ai" in lowered or "chat" in lowered


class _ChainBuilder:
    """Accumulates nodes and links each new node to the previous one."""

    def __init__(self, trigger: NodeSpec) -> None:
        self.nodes: list[NodeSpec] = [trigger]
        self.connections: dict[str, NodeConnections] = {}
        self.previous_id = trigger.id
        self.node_count = 1

    def append(self, prefix: str, node_type: str, name: str, parameters: dict) -> NodeSpec:
        self.node_count += 1
        node = NodeSpec(
            id=f"{prefix}_{self.node_count}",
            type=node_type,
            name=name,
            parameters=dict(parameters),
            position=(ORIGIN_X + self.node_count * NODE_SPACING, ORIGIN_Y),
        )
        self.nodes.append(node)
        self.connections[self.previous_id] = NodeConnections(main=[[ConnectionEdge(node=node.id)]])
        self.previous_id = node.id
        return node


def build_workflow(description: str, requirements: Requirements, context: RetrievalContext) -> WorkflowDraft:
    """Build a draft workflow graph.

    Args:
        description: Natural language description of the workflow
        requirements: Explicit requirements; a missing trigger is inferred
        context: Formatted retrieval context

    Returns:
        WorkflowDraft whose nodes form a simple path starting at ``trigger_1``
    """
    trigger_kind = requirements.trigger or infer_trigger(context)
    chain = _ChainBuilder(
        NodeSpec(
            id=TRIGGER_ID,
            type=resolve_trigger_type(trigger_kind),
            name=f"{trigger_kind} Trigger",
            position=(ORIGIN_X, ORIGIN_Y),
        )
    )

    if wants_ai_agent(description, context):
        chain.append("agent", AI_AGENT_TYPE, "AI Agent", {})

    for integration in requirements.integrations:
        chain.append("node", resolve_integration_type(integration), f"{integration} Integration", {})

    for suggested in context.suggested_nodes[:MAX_SUGGESTED_NODES]:
        chain.append("node", suggested.type, suggested.name, suggested.parameters)

    logger.debug(f"Built draft with {len(chain.nodes)} nodes (trigger: {trigger_kind})")

    return WorkflowDraft(nodes=chain.nodes, connections=chain.connections, settings={"executionOrder": "v1"})
