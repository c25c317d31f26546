"""Generation prompt assembly.

Renders the description, generation options and formatted retrieval context
into one text document for an external LLM generation step. Section order is
fixed:

1. background document
2. current task (description, features, output format, task manager flag)
3. top 3 similar workflows
4. all recommended nodes
5. microservice examples (only for microservice output)
6. task manager examples (only when the task manager is requested)
7. implementation requirements checklist

Formatting rules are exact: similarity renders as ``round(similarity * 100)``
rounded half up with a ``%`` suffix, and workflow descriptions are cut to 200
characters and followed by ``...``. The same inputs always produce
byte-identical output.
"""

import math

from n8nforge.planning.ir_models import ExampleSet, GenerationOptions, NodeSuggestion, RetrievalContext, WorkflowMatch
from n8nforge.planning.prompts.loader import format_prompt
from n8nforge.planning.prompts.templates import (
    FEATURE_REQUIREMENT_ENTRY,
    MICROSERVICE_EXAMPLE_ENTRY,
    MICROSERVICE_SECTION,
    RECOMMENDED_NODE_ENTRY,
    SIMILAR_WORKFLOW_ENTRY,
    TASK_MANAGER_EXAMPLE_ENTRY,
    TASK_MANAGER_SECTION,
    WORKFLOW_GENERATION_PROMPT,
)

MAX_PROMPT_WORKFLOWS = 3
DESCRIPTION_PREVIEW_LENGTH = 200


def format_percent(similarity: float) -> int:
    """Similarity in [0, 1] as a whole percentage, rounding halves up."""
    return math.floor(similarity * 100 + 0.5)


def _similar_workflows(workflows: list[WorkflowMatch]) -> str:
    return "\n".join(
        format_prompt(
            SIMILAR_WORKFLOW_ENTRY,
            {
                "name": workflow.name,
                "percent": format_percent(workflow.similarity),
                "description": workflow.description[:DESCRIPTION_PREVIEW_LENGTH],
            },
        )
        for workflow in workflows[:MAX_PROMPT_WORKFLOWS]
    )


def _recommended_nodes(nodes: list[NodeSuggestion]) -> str:
    return "\n".join(
        format_prompt(RECOMMENDED_NODE_ENTRY, {"name": node.name, "type": node.type, "description": node.description})
        for node in nodes
    )


def _example_section(section: str, entry: str, names: list[str]) -> str:
    entries = "\n".join(format_prompt(entry, {"name": name}) for name in names)
    return format_prompt(section, {"entries": entries})


def assemble_prompt(
    description: str,
    features: list[str],
    options: GenerationOptions,
    context: RetrievalContext,
    examples: ExampleSet,
    background: str,
) -> str:
    """Assemble the generation prompt.

    Args:
        description: What the workflow should do
        features: Required features or integrations, in user order
        options: Output format, task manager flag and complexity
        context: Formatted retrieval context
        examples: Loaded example workflows (may be empty)
        background: Project background document, included verbatim

    Returns:
        The prompt text with surrounding whitespace stripped
    """
    microservices = options.output_format == "microservices"

    microservice_section = ""
    if microservices:
        microservice_section = _example_section(
            MICROSERVICE_SECTION, MICROSERVICE_EXAMPLE_ENTRY, [e.name for e in examples.microservice_examples]
        )

    task_manager_section = ""
    if options.use_task_manager:
        task_manager_section = _example_section(
            TASK_MANAGER_SECTION, TASK_MANAGER_EXAMPLE_ENTRY, [e.name for e in examples.task_manager_examples]
        )

    prompt = format_prompt(
        WORKFLOW_GENERATION_PROMPT,
        {
            "background": background,
            "complexity": options.complexity,
            "description": description,
            "features": ", ".join(features),
            "output_format": options.output_format,
            "use_task_manager": "true" if options.use_task_manager else "false",
            "similar_workflows": _similar_workflows(context.relevant_workflows),
            "recommended_nodes": _recommended_nodes(context.suggested_nodes),
            "microservice_section": microservice_section,
            "task_manager_section": task_manager_section,
            "architecture": (
                "Create separate workflows for each major function"
                if microservices
                else "Create a single comprehensive workflow"
            ),
            "orchestration": (
                "Integrate with Task Manager for orchestration"
                if options.use_task_manager
                else "Use direct workflow connections"
            ),
            "feature_requirements": "\n".join(
                format_prompt(FEATURE_REQUIREMENT_ENTRY, {"feature": feature}) for feature in features
            ),
        },
    )
    return prompt.strip()
