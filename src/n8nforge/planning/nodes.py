"""PocketFlow nodes for the two workflow generation pipelines.

Retrieval nodes talk to the injected ``Retriever`` (retried per PocketFlow's
``max_retries``); every other node is a thin wrapper over the pure planning
functions.

Shared store keys read by all nodes:
- retriever: Retriever implementation
- description: Natural language description of the workflow

See individual node docstrings for the remaining keys.
"""

import logging
from typing import Any

from pocketflow import Node

from n8nforge.core.exceptions import ForgeError, RetrievalUnavailableError
from n8nforge.planning.context_formatter import (
    format_generation_context,
    format_node_suggestions,
    format_workflow_matches,
)
from n8nforge.planning.graph_builder import build_workflow
from n8nforge.planning.implementation_steps import draft_notes, draft_steps, generate_steps
from n8nforge.planning.ir_models import ExampleSet, GenerationOptions, Requirements, RetrievalContext
from n8nforge.planning.prompt_assembler import assemble_prompt
from n8nforge.planning.prompts.loader import format_prompt
from n8nforge.planning.prompts.templates import GENERATION_INSTRUCTIONS

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_PREVIEW_LENGTH = 1000
PLAN_WORKFLOW_LIMIT = 3


class RetrievalNode(Node):
    """Base for nodes that call one retrieval method.

    Subclasses implement ``build_request`` and ``post``.
    """

    method = ""

    def __init__(self, max_retries: int = 2, wait: float = 1.0) -> None:
        """Initialize with retry support for retrieval calls.

        Args:
            max_retries: Number of attempts before giving up (default 2)
            wait: Wait time between attempts in seconds (default 1.0)
        """
        super().__init__(max_retries=max_retries, wait=wait)

    def build_request(self, shared: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    def prep(self, shared: dict[str, Any]) -> dict[str, Any]:
        retriever = shared.get("retriever")
        if retriever is None:
            raise ValueError("Missing required 'retriever' in shared store")
        return {"retriever": retriever, "params": self.build_request(shared)}

    def exec(self, prep_res: dict[str, Any]) -> Any:
        logger.debug(f"{self.__class__.__name__}: calling {self.method}", extra={"phase": "exec"})
        return prep_res["retriever"].call(self.method, prep_res["params"])

    def exec_fallback(self, prep_res: dict[str, Any], exc: Exception) -> Any:
        """Retrieval failures abort the flow once retries are exhausted."""
        logger.warning(f"{self.__class__.__name__}: {self.method} failed after retries: {exc}")
        if isinstance(exc, ForgeError):
            raise exc
        raise RetrievalUnavailableError(f"Retrieval failed: {exc}", method=self.method) from exc


class GenerationContextNode(RetrievalNode):
    """Fetch the generation context for a draft.

    Interface:
    - Reads: description (str), examples_limit (int, optional)
    - Writes: context (RetrievalContext)
    """

    method = "build_generation_context"

    def build_request(self, shared: dict[str, Any]) -> dict[str, Any]:
        return {"query": shared["description"], "examples_limit": shared.get("examples_limit", 3)}

    def post(self, shared: dict[str, Any], prep_res: dict[str, Any], exec_res: Any) -> str:
        shared["context"] = format_generation_context(exec_res)
        return "default"


class DraftWorkflowNode(Node):
    """Build the draft graph with its checklist and notes.

    Interface:
    - Reads: description (str), requirements (Requirements), context (RetrievalContext)
    - Writes: draft (WorkflowDraft), implementation_steps (list[str]), notes (list[str])
    """

    def prep(self, shared: dict[str, Any]) -> dict[str, Any]:
        return {
            "description": shared["description"],
            "requirements": shared.get("requirements") or Requirements(),
            "context": shared.get("context") or RetrievalContext(),
        }

    def exec(self, prep_res: dict[str, Any]) -> dict[str, Any]:
        draft = build_workflow(prep_res["description"], prep_res["requirements"], prep_res["context"])
        return {
            "draft": draft,
            "implementation_steps": draft_steps(draft),
            "notes": draft_notes(prep_res["requirements"], prep_res["context"]),
        }

    def post(self, shared: dict[str, Any], prep_res: dict[str, Any], exec_res: dict[str, Any]) -> None:
        shared.update(exec_res)
        logger.info(f"DraftWorkflowNode: drafted {len(exec_res['draft'].nodes)} nodes", extra={"phase": "post"})
        return None


class WorkflowSearchNode(RetrievalNode):
    """Search workflows relevant to the description and features.

    Interface:
    - Reads: description (str), options (GenerationOptions)
    - Writes: relevant_workflows (list[WorkflowMatch])
    """

    method = "search_workflows"

    def build_request(self, shared: dict[str, Any]) -> dict[str, Any]:
        options: GenerationOptions = shared["options"]
        query = " ".join([shared["description"], *options.features])
        return {"query": query, "limit": 5, "threshold": 0.3}

    def post(self, shared: dict[str, Any], prep_res: dict[str, Any], exec_res: Any) -> str:
        shared["relevant_workflows"] = format_workflow_matches(exec_res)
        return "default"


class NodeSearchNode(RetrievalNode):
    """Search node types for the requested features.

    Interface:
    - Reads: options (GenerationOptions)
    - Writes: relevant_nodes (list[NodeSuggestion])
    """

    method = "search_nodes"

    def build_request(self, shared: dict[str, Any]) -> dict[str, Any]:
        options: GenerationOptions = shared["options"]
        return {"query": " ".join(options.features), "limit": 10, "threshold": 0.3}

    def post(self, shared: dict[str, Any], prep_res: dict[str, Any], exec_res: Any) -> str:
        shared["relevant_nodes"] = format_node_suggestions(exec_res)
        return "default"


class ExampleLoadingNode(Node):
    """Load example workflows (when the output needs them) and the background document.

    Interface:
    - Reads: options (GenerationOptions), example_library (ExampleLibrary)
    - Writes: examples (ExampleSet), background (str)
    """

    def prep(self, shared: dict[str, Any]) -> dict[str, Any]:
        library = shared.get("example_library")
        if library is None:
            raise ValueError("Missing required 'example_library' in shared store")
        return {"library": library, "options": shared["options"]}

    def exec(self, prep_res: dict[str, Any]) -> dict[str, Any]:
        library = prep_res["library"]
        options: GenerationOptions = prep_res["options"]
        examples = library.load_examples() if options.needs_examples else ExampleSet()
        return {"examples": examples, "background": library.load_background()}

    def post(self, shared: dict[str, Any], prep_res: dict[str, Any], exec_res: dict[str, Any]) -> str:
        shared.update(exec_res)
        return "default"


class PromptAssemblyNode(Node):
    """Assemble the generation prompt, plan and instructions.

    Interface:
    - Reads: description, options, relevant_workflows, relevant_nodes, examples, background
    - Writes: prompt (str), plan (dict), instructions (str)
    """

    def prep(self, shared: dict[str, Any]) -> dict[str, Any]:
        return {
            "description": shared["description"],
            "options": shared["options"],
            "context": RetrievalContext(
                relevant_workflows=shared.get("relevant_workflows", []),
                suggested_nodes=shared.get("relevant_nodes", []),
            ),
            "examples": shared.get("examples") or ExampleSet(),
            "background": shared.get("background", ""),
        }

    def exec(self, prep_res: dict[str, Any]) -> dict[str, Any]:
        description: str = prep_res["description"]
        options: GenerationOptions = prep_res["options"]
        context: RetrievalContext = prep_res["context"]
        examples: ExampleSet = prep_res["examples"]

        prompt = assemble_prompt(description, options.features, options, context, examples, prep_res["background"])

        plan = {
            "description": description,
            "requirements": {
                "features": list(options.features),
                "complexity": options.complexity,
                "patterns": ["microservice", "modular"] if options.output_format == "microservices" else ["standalone"],
                "useTaskManager": options.use_task_manager,
            },
            "context": {
                "relevantWorkflows": [
                    {"name": w.name, "description": w.description, "similarity": w.similarity}
                    for w in context.relevant_workflows[:PLAN_WORKFLOW_LIMIT]
                ],
                "suggestedNodes": [
                    {"type": n.type, "name": n.name, "description": n.description} for n in context.suggested_nodes
                ],
                "examplePatterns": {
                    "microservices": "DemoVideoCreation pattern" if examples.microservice_examples else None,
                    "taskManager": "TaskManager pattern" if examples.task_manager_examples else None,
                },
            },
            "implementationSteps": generate_steps(options.features, options.output_format, options.use_task_manager),
            "systemPrompt": prompt[:SYSTEM_PROMPT_PREVIEW_LENGTH] + "... [truncated for display]",
        }

        instructions = format_prompt(
            GENERATION_INSTRUCTIONS,
            {
                "workflow_count": len(context.relevant_workflows),
                "node_count": len(context.suggested_nodes),
                "microservice_count": len(examples.microservice_examples),
                "task_manager_count": len(examples.task_manager_examples),
                "target": (
                    "multiple interconnected workflows"
                    if options.output_format == "microservices"
                    else "a single workflow"
                ),
                "feature_list": "\n".join(f"- {feature}" for feature in options.features),
            },
        ).strip()

        return {"prompt": prompt, "plan": plan, "instructions": instructions}

    def post(self, shared: dict[str, Any], prep_res: dict[str, Any], exec_res: dict[str, Any]) -> None:
        shared.update(exec_res)
        logger.info(
            f"PromptAssemblyNode: assembled prompt ({len(exec_res['prompt'])} chars)", extra={"phase": "post"}
        )
        return None
