"""Natural-language insights for a query's retrieval results."""

from typing import Any

from n8nforge.planning.ir_models import Insights, NodeSuggestion
from n8nforge.planning.prompt_assembler import format_percent

TRIGGER_MARKERS = ("trigger", "webhook")
AI_MARKERS = ("ai", "agent", "openai")
STORAGE_MARKERS = ("supabase", "postgres")
DATABASE_MARKERS = ("database",)
MESSAGING_MARKERS = ("telegram", "slack", "email")

MAX_NAMED_COMPONENTS = 3


def _mentions(nodes: list[NodeSuggestion], markers: tuple[str, ...]) -> bool:
    return any(marker in node.type for node in nodes for marker in markers)


def generate_summary(insights: Insights) -> str:
    """One-paragraph summary of match counts and the best similarity."""
    workflow_count = len(insights.workflow_matches)
    node_count = len(insights.node_suggestions)

    if workflow_count == 0:
        return (
            f'No exact workflow matches found for "{insights.query}", but {node_count} relevant nodes '
            "were identified that could help build this solution."
        )

    top_similarity = format_percent(insights.workflow_matches[0].similarity)
    return (
        f'Found {workflow_count} relevant workflows and {node_count} suggested nodes for "{insights.query}". '
        f"The most similar workflow has {top_similarity}% similarity."
    )


def suggest_approach(insights: Insights) -> str:
    """Pick an approach; the first matching check wins."""
    patterns = insights.recommended_patterns

    if "microservice" in patterns:
        return "Use a microservice pattern with webhook triggers for modular design."
    if "ai_agent" in patterns:
        return "Implement an AI agent with tool integration for intelligent automation."
    if "rag" in patterns:
        return "Use RAG pattern for context-aware responses with vector database integration."
    if insights.workflow_matches:
        return f'Consider adapting the "{insights.workflow_matches[0].name}" workflow as a starting point.'

    return "Start with a simple webhook trigger and build incrementally."


def identify_key_components(insights: Insights) -> list[str]:
    """Component categories implied by the suggested nodes, then up to 3 node names."""
    nodes = insights.node_suggestions
    components = []

    if not _mentions(nodes, TRIGGER_MARKERS):
        components.append("Webhook or manual trigger")
    if _mentions(nodes, AI_MARKERS):
        components.append("AI/LLM integration")
    if _mentions(nodes, STORAGE_MARKERS):
        components.append("Database storage")
    if _mentions(nodes, MESSAGING_MARKERS):
        components.append("Messaging integration")

    components.extend(f"{node.name} node" for node in nodes[:MAX_NAMED_COMPONENTS])
    return components


def get_considerations(insights: Insights) -> list[str]:
    """Conditional notes followed by the two reliability notes that always apply."""
    considerations = []

    if insights.complexity_estimate == "advanced":
        considerations.append("This is a complex workflow that may require multiple sub-workflows")
    if "ai_agent" in insights.recommended_patterns:
        considerations.append("Configure AI agent with appropriate tools and memory management")
    if _mentions(insights.node_suggestions, DATABASE_MARKERS):
        considerations.append("Set up database credentials and schema before implementation")

    considerations.append("Consider error handling and retry logic for reliability")
    considerations.append("Implement logging for debugging and monitoring")
    return considerations


def synthesize_insights(insights: Insights) -> dict[str, Any]:
    """Build the full insights payload returned by the insights tool."""
    return {
        "query": insights.query,
        "summary": generate_summary(insights),
        "workflowMatches": [match.to_dict() for match in insights.workflow_matches],
        "nodeSuggestions": [node.to_dict() for node in insights.node_suggestions],
        "recommendedPatterns": list(insights.recommended_patterns),
        "complexityEstimate": insights.complexity_estimate,
        "implementation": {
            "suggestedApproach": suggest_approach(insights),
            "keyComponents": identify_key_components(insights),
            "considerations": get_considerations(insights),
        },
    }
