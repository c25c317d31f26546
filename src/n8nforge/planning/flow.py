"""Flow orchestration for workflow drafting and complete generation.

Draft flow (rag_generate_workflow):
    GenerationContext → DraftWorkflow

Generation flow (generate_complete_workflow):
    WorkflowSearch → NodeSearch → ExampleLoading → PromptAssembly

Both flows are linear. Callers initialize the shared store with the
``retriever`` (and ``example_library`` for generation) plus the request
fields documented on each node.
"""

import logging

from pocketflow import Flow

from n8nforge.planning.nodes import (
    DraftWorkflowNode,
    ExampleLoadingNode,
    GenerationContextNode,
    NodeSearchNode,
    PromptAssemblyNode,
    WorkflowSearchNode,
)

logger = logging.getLogger(__name__)


def create_draft_flow(max_retries: int = 2, wait: float = 1.0) -> Flow:
    """Create the flow that drafts a workflow graph from retrieved context.

    Args:
        max_retries: Attempts per retrieval call
        wait: Wait time between retrieval attempts in seconds (use 0 for tests)
    """
    context_node = GenerationContextNode(max_retries=max_retries, wait=wait)
    draft_node = DraftWorkflowNode()

    context_node >> draft_node

    logger.debug("Draft flow created with 2 nodes")
    return Flow(start=context_node)


def create_generation_flow(max_retries: int = 2, wait: float = 1.0) -> Flow:
    """Create the flow that prepares a complete generation prompt and plan.

    Args:
        max_retries: Attempts per retrieval call
        wait: Wait time between retrieval attempts in seconds (use 0 for tests)
    """
    workflow_search = WorkflowSearchNode(max_retries=max_retries, wait=wait)
    node_search = NodeSearchNode(max_retries=max_retries, wait=wait)
    example_loading = ExampleLoadingNode()
    prompt_assembly = PromptAssemblyNode()

    workflow_search >> node_search >> example_loading >> prompt_assembly

    logger.debug("Generation flow created with 4 nodes")
    return Flow(start=workflow_search)
