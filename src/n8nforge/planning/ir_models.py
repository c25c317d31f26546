"""Pydantic models for retrieval context and generated workflow drafts.

Attributes are snake_case in Python and serialize to the camelCase keys used
by n8n and by the tool payloads (``executionOrder``, ``useCases``, ...).
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Complexity = Literal["simple", "intermediate", "advanced"]
OutputFormat = Literal["single", "microservices"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class NodeSpec(_CamelModel):
    """A single node placed in a workflow draft."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., pattern="^[a-zA-Z0-9_-]+$")
    type: str
    name: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    position: tuple[int, int]


class ConnectionEdge(_CamelModel):
    """Edge to a downstream node, in n8n's connection format."""

    node: str
    type: Literal["main"] = "main"
    index: int = 0


class NodeConnections(_CamelModel):
    """Outgoing connections of one node: a single output port of ordered edges."""

    main: list[list[ConnectionEdge]] = Field(default_factory=list)


class WorkflowDraft(_CamelModel):
    """Draft workflow graph: ordered nodes plus a source-id keyed connection map."""

    nodes: list[NodeSpec]
    connections: dict[str, NodeConnections] = Field(default_factory=dict)
    settings: dict[str, Any] = Field(default_factory=lambda: {"executionOrder": "v1"})

    def successor(self, node_id: str) -> Optional[str]:
        """Return the id of the node following ``node_id``, if any."""
        outgoing = self.connections.get(node_id)
        if not outgoing or not outgoing.main or not outgoing.main[0]:
            return None
        return outgoing.main[0][0].node

    def node_ids(self) -> list[str]:
        """Return node ids in chain order."""
        return [node.id for node in self.nodes]


class WorkflowMatch(_CamelModel):
    """A workflow returned by the retrieval service, in relevance order."""

    name: str
    description: str = ""
    similarity: float = 0.0
    id: Optional[str] = None
    complexity: Optional[str] = None
    patterns: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class NodeSuggestion(_CamelModel):
    """A node type suggested by the retrieval service."""

    type: str
    name: str
    description: str = ""
    similarity: Optional[float] = None
    use_cases: list[str] = Field(default_factory=list)
    parameters: dict[str, Any] = Field(default_factory=dict)


class RetrievalContext(_CamelModel):
    """Normalized view of retrieval results used for drafting and prompting."""

    relevant_workflows: list[WorkflowMatch] = Field(default_factory=list)
    suggested_nodes: list[NodeSuggestion] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)


class Requirements(_CamelModel):
    """User-supplied requirements for a workflow draft. Absent fields are inferred."""

    trigger: Optional[str] = None
    integrations: list[str] = Field(default_factory=list)
    complexity: Optional[Complexity] = None
    patterns: list[str] = Field(default_factory=list)


class GenerationOptions(_CamelModel):
    """Options for complete workflow generation."""

    features: list[str] = Field(default_factory=list)
    output_format: OutputFormat = "single"
    use_task_manager: bool = False
    complexity: Complexity = "intermediate"

    @property
    def needs_examples(self) -> bool:
        return self.output_format == "microservices" or self.use_task_manager


class ExampleWorkflow(BaseModel):
    """An example workflow file loaded from the project."""

    name: str
    workflow: dict[str, Any]


class ExampleSet(_CamelModel):
    """Example workflows grouped by the pattern they illustrate."""

    microservice_examples: list[ExampleWorkflow] = Field(default_factory=list)
    task_manager_examples: list[ExampleWorkflow] = Field(default_factory=list)


class Insights(_CamelModel):
    """Normalized insights returned for a free-text query."""

    query: str = ""
    workflow_matches: list[WorkflowMatch] = Field(default_factory=list)
    node_suggestions: list[NodeSuggestion] = Field(default_factory=list)
    recommended_patterns: list[str] = Field(default_factory=list)
    complexity_estimate: str = "intermediate"
