"""RAG service for MCP server.

Wraps workflow search, insights and workflow drafting. Every method returns
a ``ToolCallResult``; collaborator failures come back as error envelopes.
"""

import logging
from typing import Any, Optional

from n8nforge.core.exceptions import MalformedInputError
from n8nforge.planning.context_formatter import format_insights, format_node_suggestions, format_workflow_matches
from n8nforge.planning.flow import create_draft_flow
from n8nforge.planning.insights import synthesize_insights
from n8nforge.planning.ir_models import Requirements, RetrievalContext, WorkflowDraft
from n8nforge.retrieval.client import Retriever

from ..utils.errors import ToolCallResult, error_result, success_result
from .base_service import BaseService, ensure_stateless

logger = logging.getLogger(__name__)


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MalformedInputError(f"'{field}' must be a non-empty string", field=field)
    return value


class RagService(BaseService):
    """Service for retrieval-backed search, insights and drafting."""

    # Seconds between retrieval attempts inside flows
    retry_wait = 1.0

    @classmethod
    @ensure_stateless
    def search_workflows(
        cls,
        query: str,
        limit: int = 5,
        threshold: float = 0.5,
        include_nodes: bool = False,
        retriever: Optional[Retriever] = None,
    ) -> ToolCallResult:
        """Search workflows (and optionally nodes) by semantic similarity.

        Node search uses twice the workflow limit. If it fails, the whole
        request fails.
        """
        try:
            _require_text(query, "query")
            retriever = cls.create_fresh_instances(retriever=retriever)["retriever"]

            matches = format_workflow_matches(
                retriever.call("search_workflows", {"query": query, "limit": limit, "threshold": threshold})
            )
            response: dict[str, Any] = {
                "query": query,
                "workflowMatches": [match.to_dict() for match in matches],
            }

            if include_nodes:
                nodes = format_node_suggestions(
                    retriever.call("search_nodes", {"query": query, "limit": limit * 2, "threshold": threshold})
                )
                response["suggestedNodes"] = [
                    {
                        "type": node.type,
                        "name": node.name,
                        "description": node.description,
                        "similarity": node.similarity,
                        "useCases": node.use_cases,
                    }
                    for node in nodes
                ]

            response["totalMatches"] = len(matches)
            logger.info(f"Workflow search returned {len(matches)} matches")
            return success_result(response)
        except Exception as e:
            return error_result(e, "Failed to search workflows using RAG")

    @classmethod
    @ensure_stateless
    def get_insights(cls, query: str, retriever: Optional[Retriever] = None) -> ToolCallResult:
        """Summarize matches, approach, key components and considerations for a query."""
        try:
            _require_text(query, "query")
            retriever = cls.create_fresh_instances(retriever=retriever)["retriever"]

            insights = format_insights(retriever.call("query_insights", {"query": query}), query=query)
            return success_result(synthesize_insights(insights))
        except Exception as e:
            return error_result(e, "Failed to get insights from RAG")

    @classmethod
    @ensure_stateless
    def generate_workflow(
        cls,
        description: str,
        requirements: Optional[dict[str, Any]] = None,
        examples_limit: int = 3,
        retriever: Optional[Retriever] = None,
    ) -> ToolCallResult:
        """Draft a workflow graph from retrieved generation context."""
        try:
            _require_text(description, "description")
            parsed = Requirements.model_validate(requirements or {})
            retriever = cls.create_fresh_instances(retriever=retriever)["retriever"]

            shared: dict[str, Any] = {
                "retriever": retriever,
                "description": description,
                "requirements": parsed,
                "examples_limit": examples_limit,
            }
            create_draft_flow(wait=cls.retry_wait).run(shared)

            context: RetrievalContext = shared["context"]
            draft: WorkflowDraft = shared["draft"]
            response = {
                "description": description,
                "requirements": requirements or {},
                "context": {
                    "relevantWorkflows": [
                        {"name": w.name, "complexity": w.complexity, "patterns": w.patterns}
                        for w in context.relevant_workflows
                    ],
                    "suggestedNodes": [
                        {"type": n.type, "name": n.name, "purpose": n.description} for n in context.suggested_nodes
                    ],
                    "patterns": context.patterns,
                },
                "generatedStructure": draft.to_dict(),
                "implementationSteps": shared["implementation_steps"],
                "notes": shared["notes"],
            }
            return success_result(response)
        except Exception as e:
            return error_result(e, "Failed to generate workflow structure")
