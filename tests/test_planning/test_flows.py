"""Tests for the drafting and generation flows with fake collaborators."""

import pytest

from n8nforge.core.exceptions import ResourceMissingError, RetrievalUnavailableError
from n8nforge.planning.flow import create_draft_flow, create_generation_flow
from n8nforge.planning.ir_models import GenerationOptions, Requirements
from tests.shared.fakes import FakeExampleLibrary, FakeRetriever, node_hit, workflow_hit

GENERATION_CONTEXT = {
    "relevant_workflows": [{"name": "Support Bot", "complexity": "intermediate", "patterns": ["ai_agent"]}],
    "suggested_nodes": [{"type": "n8n-nodes-base.slack", "name": "Slack", "description": "Post messages"}],
    "patterns": ["ai_agent"],
}


def run_draft(retriever, description="AI chatbot with memory", **shared_extra):
    shared = {"retriever": retriever, "description": description, **shared_extra}
    create_draft_flow(wait=0).run(shared)
    return shared


def run_generation(retriever, library, options):
    shared = {
        "retriever": retriever,
        "example_library": library,
        "description": "Cross-post content",
        "options": options,
    }
    create_generation_flow(wait=0).run(shared)
    return shared


class TestDraftFlow:
    def test_draft_from_generation_context(self):
        retriever = FakeRetriever({"build_generation_context": GENERATION_CONTEXT})

        shared = run_draft(retriever, requirements=Requirements(integrations=["telegram"]), examples_limit=5)

        assert retriever.calls == [
            ("build_generation_context", {"query": "AI chatbot with memory", "examples_limit": 5})
        ]
        assert shared["draft"].node_ids() == ["trigger_1", "agent_2", "node_3", "node_4"]
        assert shared["draft"].nodes[3].type == "n8n-nodes-base.slack"
        assert shared["implementation_steps"][0] == "1. Create a new workflow in n8n"
        assert shared["notes"][-1] == "Test thoroughly with edge cases before deploying to production"

    def test_missing_requirements_are_inferred(self):
        retriever = FakeRetriever({"build_generation_context": {"patterns": ["microservice"]}})

        shared = run_draft(retriever, description="Sync rows")

        assert shared["draft"].nodes[0].type == "n8n-nodes-base.webhook"
        assert shared["notes"][0].startswith("Consider implementing as a microservice")

    def test_retries_transient_failures(self):
        retriever = FakeRetriever().queue(
            "build_generation_context", RetrievalUnavailableError("busy"), GENERATION_CONTEXT
        )

        shared = run_draft(retriever)

        assert retriever.methods() == ["build_generation_context", "build_generation_context"]
        assert "draft" in shared

    def test_persistent_failure_propagates(self):
        retriever = FakeRetriever({"build_generation_context": RetrievalUnavailableError("down")})

        with pytest.raises(RetrievalUnavailableError, match="down"):
            run_draft(retriever)

    def test_unexpected_errors_become_retrieval_errors(self):
        retriever = FakeRetriever({"build_generation_context": RuntimeError("socket closed")})

        with pytest.raises(RetrievalUnavailableError, match="socket closed"):
            run_draft(retriever)

    def test_missing_retriever_fails_fast(self):
        with pytest.raises(ValueError, match="retriever"):
            create_draft_flow(wait=0).run({"description": "x"})


class TestGenerationFlow:
    def make_retriever(self):
        return FakeRetriever(
            {
                "search_workflows": [workflow_hit("Cross Poster", 0.81), workflow_hit("Feed Relay", 0.6)],
                "search_nodes": [node_hit("WhatsApp", "n8n-nodes-base.whatsApp")],
            }
        )

    def test_retrieval_requests(self):
        retriever = self.make_retriever()

        run_generation(retriever, FakeExampleLibrary(), GenerationOptions(features=["whatsapp", "linkedin"]))

        assert retriever.calls == [
            ("search_workflows", {"query": "Cross-post content whatsapp linkedin", "limit": 5, "threshold": 0.3}),
            ("search_nodes", {"query": "whatsapp linkedin", "limit": 10, "threshold": 0.3}),
        ]

    def test_single_output_skips_examples(self):
        library = FakeExampleLibrary(microservices=["A.json"])

        shared = run_generation(self.make_retriever(), library, GenerationOptions(features=["whatsapp"]))

        assert library.examples_loaded == 0
        assert shared["plan"]["context"]["examplePatterns"] == {"microservices": None, "taskManager": None}
        assert "Microservice Pattern Examples" not in shared["prompt"]

    def test_microservices_load_examples(self):
        library = FakeExampleLibrary(microservices=["Render.json"], task_manager=["Tasks.json"])
        options = GenerationOptions(features=["whatsapp"], output_format="microservices")

        shared = run_generation(self.make_retriever(), library, options)

        assert library.examples_loaded == 1
        assert shared["plan"]["context"]["examplePatterns"] == {
            "microservices": "DemoVideoCreation pattern",
            "taskManager": "TaskManager pattern",
        }
        assert "#### Render.json" in shared["prompt"]
        # Task manager section needs the flag, not just loaded examples
        assert "#### Tasks.json" not in shared["prompt"]

    def test_plan_contents(self):
        options = GenerationOptions(features=["whatsapp"], output_format="microservices", use_task_manager=True)

        shared = run_generation(self.make_retriever(), FakeExampleLibrary(background="BG"), options)

        plan = shared["plan"]
        assert plan["description"] == "Cross-post content"
        assert plan["requirements"] == {
            "features": ["whatsapp"],
            "complexity": "intermediate",
            "patterns": ["microservice", "modular"],
            "useTaskManager": True,
        }
        assert plan["context"]["relevantWorkflows"][0] == {
            "name": "Cross Poster",
            "description": "Cross Poster description",
            "similarity": 0.81,
        }
        assert plan["context"]["suggestedNodes"][0]["type"] == "n8n-nodes-base.whatsApp"
        assert len(plan["implementationSteps"]) == 6
        assert plan["systemPrompt"].endswith("... [truncated for display]")
        assert shared["prompt"].startswith("# n8n Workflow Generation System Prompt\n\nBG")

    def test_instructions(self):
        shared = run_generation(self.make_retriever(), FakeExampleLibrary(), GenerationOptions(features=["whatsapp"]))

        instructions = shared["instructions"]
        assert instructions.startswith("## Workflow Generation Ready")
        assert "**Found 2 relevant workflows**" in instructions
        assert "**Identified 1 relevant nodes**" in instructions
        assert "The LLM will create a single workflow" in instructions
        assert "- whatsapp" in instructions

    def test_missing_examples_fail_the_flow(self):
        library = FakeExampleLibrary(error=ResourceMissingError("Example directory not found: /x/TaskManager"))
        options = GenerationOptions(features=["whatsapp"], use_task_manager=True)

        with pytest.raises(ResourceMissingError):
            run_generation(self.make_retriever(), library, options)

    def test_node_search_failure_fails_the_flow(self):
        retriever = self.make_retriever()
        retriever.responses["search_nodes"] = RetrievalUnavailableError("index offline")

        with pytest.raises(RetrievalUnavailableError):
            run_generation(retriever, FakeExampleLibrary(), GenerationOptions(features=["x"]))
