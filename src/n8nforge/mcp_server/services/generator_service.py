"""Generator service for MCP server.

Prepares everything an LLM needs to write a complete n8n workflow: retrieved
workflows and nodes, example workflows, the generation prompt and an
implementation plan.
"""

import logging
from typing import Any, Optional

from n8nforge.core.exceptions import MalformedInputError
from n8nforge.planning.flow import create_generation_flow
from n8nforge.planning.ir_models import GenerationOptions
from n8nforge.retrieval.client import Retriever
from n8nforge.retrieval.documents import ExampleLibrary

from ..utils.errors import ToolCallResult, error_result, success_result
from .base_service import BaseService, ensure_stateless

logger = logging.getLogger(__name__)


class GeneratorService(BaseService):
    """Service for complete workflow generation context."""

    # Seconds between retrieval attempts inside flows
    retry_wait = 1.0

    @classmethod
    @ensure_stateless
    def generate_complete_workflow(
        cls,
        description: str,
        features: list[str],
        use_task_manager: bool = False,
        output_format: str = "single",
        complexity: str = "intermediate",
        retriever: Optional[Retriever] = None,
        example_library: Optional[ExampleLibrary] = None,
    ) -> ToolCallResult:
        """Build the generation prompt and plan for a complete workflow.

        Examples are loaded only for microservice output or when the task
        manager is requested; the background document is always loaded.

        Returns:
            Envelope with ``{success, plan, prompt, instructions}``
        """
        try:
            if not isinstance(description, str) or not description.strip():
                raise MalformedInputError("'description' must be a non-empty string", field="description")
            if not isinstance(features, list):
                raise MalformedInputError("'features' must be a list of strings", field="features")

            options = GenerationOptions.model_validate(
                {
                    "features": features,
                    "output_format": output_format,
                    "use_task_manager": use_task_manager,
                    "complexity": complexity,
                }
            )
            instances = cls.create_fresh_instances(retriever=retriever, example_library=example_library)

            shared: dict[str, Any] = {
                "retriever": instances["retriever"],
                "example_library": instances["example_library"],
                "description": description,
                "options": options,
            }
            create_generation_flow(wait=cls.retry_wait).run(shared)

            logger.info(
                f"Prepared generation context: {len(shared['relevant_workflows'])} workflows, "
                f"{len(shared['relevant_nodes'])} nodes"
            )
            return success_result(
                {
                    "success": True,
                    "plan": shared["plan"],
                    "prompt": shared["prompt"],
                    "instructions": shared["instructions"],
                }
            )
        except Exception as e:
            return error_result(e, "Failed to generate complete workflow")
