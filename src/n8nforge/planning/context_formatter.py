"""Normalize raw retrieval results into typed context records.

The retrieval service emits two shapes for the same entities:

- search results: ``{"name", "description", "similarity", "id", "data": {...}}``
  with details such as ``complexity``, ``patterns``, ``node_type`` and
  ``use_cases`` nested under ``data``;
- generation-context entries, where those fields sit at the top level.

Both are accepted. Fields are read from the top level first and from
``data`` second. Missing collections default to empty and entry order is
kept as-is, since it is the service's relevance order.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from n8nforge.core.exceptions import RetrievalUnavailableError
from n8nforge.planning.ir_models import Insights, NodeSuggestion, RetrievalContext, WorkflowMatch

logger = logging.getLogger(__name__)


def _entries(raw: Optional[Iterable[Any]], label: str) -> list[Mapping[str, Any]]:
    if raw is None:
        return []
    if isinstance(raw, (str, bytes, Mapping)):
        raise RetrievalUnavailableError(f"Malformed retrieval response: {label} must be a list")

    entries = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise RetrievalUnavailableError(
                f"Malformed retrieval response: {label}[{index}] is {type(entry).__name__}, expected an object"
            )
        entries.append(entry)
    return entries


def _field(entry: Mapping[str, Any], key: str, default: Any = None) -> Any:
    value = entry.get(key)
    if value is None:
        data = entry.get("data")
        if isinstance(data, Mapping):
            value = data.get(key)
    return default if value is None else value


def _string_list(value: Any, label: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (bytes, Mapping)) or not isinstance(value, Iterable):
        raise RetrievalUnavailableError(
            f"Malformed retrieval response: {label} is {type(value).__name__}, expected a list of strings"
        )
    return [str(item) for item in value]


def _similarity(value: Any) -> Optional[float]:
    try:
        similarity = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # json.loads accepts NaN and Infinity
    return similarity if math.isfinite(similarity) else None


def format_workflow_matches(raw: Optional[Iterable[Any]]) -> list[WorkflowMatch]:
    """Project raw workflow results onto ``WorkflowMatch`` records."""
    matches = []
    for entry in _entries(raw, "workflows"):
        workflow_id = _field(entry, "id")
        complexity = _field(entry, "complexity")
        matches.append(
            WorkflowMatch(
                name=str(_field(entry, "name", "")),
                description=str(_field(entry, "description", "")),
                similarity=_similarity(_field(entry, "similarity")) or 0.0,
                id=str(workflow_id) if workflow_id is not None else None,
                complexity=str(complexity) if complexity is not None else None,
                patterns=_string_list(_field(entry, "patterns"), "patterns"),
                tags=_string_list(_field(entry, "tags"), "tags"),
            )
        )
    return matches


def format_node_suggestions(raw: Optional[Iterable[Any]]) -> list[NodeSuggestion]:
    """Project raw node results onto ``NodeSuggestion`` records.

    The node type comes from ``type``, then ``data.node_type``, then the
    entry name, so search hits without an explicit type stay usable.
    """
    suggestions = []
    for entry in _entries(raw, "nodes"):
        name = str(_field(entry, "name", ""))
        parameters = _field(entry, "parameters", {})
        suggestions.append(
            NodeSuggestion(
                type=str(entry.get("type") or _field(entry, "node_type") or name),
                name=name,
                description=str(_field(entry, "description", "")),
                similarity=_similarity(_field(entry, "similarity")),
                use_cases=_string_list(_field(entry, "use_cases"), "use_cases"),
                parameters=dict(parameters) if isinstance(parameters, Mapping) else {},
            )
        )
    return suggestions


def format_patterns(raw: Optional[Iterable[Any]]) -> list[str]:
    """Deduplicate pattern tags, keeping first-seen order."""
    return list(dict.fromkeys(_string_list(raw, "patterns")))


def format_context(
    raw_workflows: Optional[Iterable[Any]],
    raw_nodes: Optional[Iterable[Any]],
    raw_patterns: Optional[Iterable[Any]] = None,
) -> RetrievalContext:
    """Build a ``RetrievalContext`` from the three raw result collections."""
    context = RetrievalContext(
        relevant_workflows=format_workflow_matches(raw_workflows),
        suggested_nodes=format_node_suggestions(raw_nodes),
        patterns=format_patterns(raw_patterns),
    )
    logger.debug(
        f"Formatted context: {len(context.relevant_workflows)} workflows, "
        f"{len(context.suggested_nodes)} nodes, patterns={context.patterns}"
    )
    return context


def format_generation_context(raw: Any) -> RetrievalContext:
    """Format the object returned by the ``build_generation_context`` method."""
    if raw is None:
        return RetrievalContext()
    if not isinstance(raw, Mapping):
        raise RetrievalUnavailableError("Malformed retrieval response: generation context must be an object")
    return format_context(raw.get("relevant_workflows"), raw.get("suggested_nodes"), raw.get("patterns"))


def format_insights(raw: Any, query: str = "") -> Insights:
    """Format the object returned by the ``query_insights`` method."""
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise RetrievalUnavailableError("Malformed retrieval response: insights must be an object")
    return Insights(
        query=str(raw.get("query") or query),
        workflow_matches=format_workflow_matches(raw.get("workflow_matches")),
        node_suggestions=format_node_suggestions(raw.get("node_suggestions")),
        recommended_patterns=format_patterns(raw.get("recommended_patterns")),
        complexity_estimate=str(raw.get("complexity_estimate") or "intermediate"),
    )
