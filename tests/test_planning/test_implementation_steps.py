"""Tests for implementation checklists."""

from n8nforge.planning.graph_builder import build_workflow
from n8nforge.planning.implementation_steps import draft_notes, draft_steps, generate_steps
from n8nforge.planning.ir_models import Requirements, RetrievalContext


class TestGenerateSteps:
    def test_single_without_features_has_only_fixed_steps(self):
        steps = generate_steps([], "single", False)

        assert steps == [
            "Create main workflow with appropriate trigger",
            "Implement error handling and logging",
            "Add documentation via Sticky Notes",
            "Test all connections and data flow",
        ]

    def test_single_adds_one_step_per_feature_in_order(self):
        steps = generate_steps(["whatsapp", "linkedin"], "single", False)

        assert steps[1:3] == [
            "Add whatsapp integration nodes and configuration",
            "Add linkedin integration nodes and configuration",
        ]
        assert len(steps) == 6

    def test_single_ignores_task_manager(self):
        assert generate_steps(["slack"], "single", True) == generate_steps(["slack"], "single", False)

    def test_microservices_with_task_manager(self):
        steps = generate_steps(["slack", "telegram"], "microservices", True)

        assert len(steps) == 7
        assert steps[0].startswith("Create main orchestrator workflow")
        assert steps[1] == "Implement slack microservice with webhook trigger and response"
        assert steps[2] == "Implement telegram microservice with webhook trigger and response"
        assert steps[3:5] == [
            "Integrate Task Manager for workflow orchestration",
            "Add task creation and monitoring capabilities",
        ]
        assert steps[5:] == ["Connect microservices via HTTP requests", "Add centralized logging and error handling"]

    def test_microservices_without_task_manager(self):
        steps = generate_steps(["slack"], "microservices", False)

        assert len(steps) == 4
        assert not any("Task Manager" in step for step in steps)


class TestDraftSteps:
    def test_agent_step_only_with_agent_node(self):
        with_agent = draft_steps(build_workflow("AI bot", Requirements(), RetrievalContext()))
        without_agent = draft_steps(build_workflow("Copy rows", Requirements(), RetrievalContext()))

        assert len(with_agent) == 7
        assert "3. Configure the AI agent with appropriate model and tools" in with_agent
        assert len(without_agent) == 6
        assert not any("AI agent" in step for step in without_agent)

    def test_numbering_is_contiguous(self):
        steps = draft_steps(build_workflow("AI bot", Requirements(), RetrievalContext()))

        assert [step.split(".")[0] for step in steps] == [str(n) for n in range(1, len(steps) + 1)]


class TestDraftNotes:
    def test_always_present_notes(self):
        notes = draft_notes(Requirements(), RetrievalContext())

        assert notes == [
            "Remember to add proper error handling and logging",
            "Test thoroughly with edge cases before deploying to production",
        ]

    def test_conditional_notes_come_first(self):
        notes = draft_notes(Requirements(complexity="advanced"), RetrievalContext(patterns=["microservice"]))

        assert len(notes) == 4
        assert notes[0] == "Consider implementing as a microservice with proper error responses"
        assert notes[1] == "This workflow may benefit from being split into sub-workflows"
