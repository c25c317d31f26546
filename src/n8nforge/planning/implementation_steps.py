"""Implementation checklists for generated workflows.

Step wording is templated; the number and order of steps is what callers
rely on.
"""

from n8nforge.planning.ir_models import OutputFormat, Requirements, RetrievalContext, WorkflowDraft


def generate_steps(features: list[str], output_format: OutputFormat, use_task_manager: bool) -> list[str]:
    """Ordered implementation steps for complete workflow generation.

    Microservices: orchestrator, one step per feature, two task manager steps
    when requested, then HTTP wiring and centralized logging.
    Single: trigger, one step per feature, then error handling, documentation
    and testing.
    """
    steps = []

    if output_format == "microservices":
        steps.append(
            "Create main orchestrator workflow with webhook trigger and separate microservice workflows for each feature"
        )
        steps.extend(f"Implement {feature} microservice with webhook trigger and response" for feature in features)
        if use_task_manager:
            steps.append("Integrate Task Manager for workflow orchestration")
            steps.append("Add task creation and monitoring capabilities")
        steps.append("Connect microservices via HTTP requests")
        steps.append("Add centralized logging and error handling")
    else:
        steps.append("Create main workflow with appropriate trigger")
        steps.extend(f"Add {feature} integration nodes and configuration" for feature in features)
        steps.append("Implement error handling and logging")
        steps.append("Add documentation via Sticky Notes")
        steps.append("Test all connections and data flow")

    return steps


def draft_steps(draft: WorkflowDraft) -> list[str]:
    """Numbered steps for assembling a draft in the n8n editor."""
    steps = [
        "Create a new workflow in n8n",
        "Add the trigger node and configure its settings",
    ]
    if any("agent" in node.type for node in draft.nodes):
        steps.append("Configure the AI agent with appropriate model and tools")
    steps.extend(
        [
            "Connect all nodes as shown in the structure",
            "Configure credentials for each integration",
            "Test the workflow with sample data",
            "Add error handling and logging nodes",
        ]
    )
    return [f"{number}. {step}" for number, step in enumerate(steps, start=1)]


def draft_notes(requirements: Requirements, context: RetrievalContext) -> list[str]:
    """Notes attached to a draft, based on patterns and requested complexity."""
    notes = []
    if "microservice" in context.patterns:
        notes.append("Consider implementing as a microservice with proper error responses")
    if requirements.complexity == "advanced":
        notes.append("This workflow may benefit from being split into sub-workflows")
    notes.append("Remember to add proper error handling and logging")
    notes.append("Test thoroughly with edge cases before deploying to production")
    return notes
