"""In-memory stand-ins for the retrieval service and example documents."""

from typing import Any, Optional

from n8nforge.planning.ir_models import ExampleSet, ExampleWorkflow


class FakeRetriever:
    """Answers retrieval calls from a method -> response mapping.

    A response may be a value, an exception instance (raised on every call)
    or a list of such items consumed one per call. Every call is recorded.
    """

    def __init__(self, responses: Optional[dict[str, Any]] = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._sequences: dict[str, list[Any]] = {}

    def queue(self, method: str, *responses: Any) -> "FakeRetriever":
        self._sequences[method] = list(responses)
        return self

    def call(self, method: str, params: dict[str, Any]) -> Any:
        self.calls.append((method, params))
        if self._sequences.get(method):
            response = self._sequences[method].pop(0)
        else:
            response = self.responses.get(method)
        if isinstance(response, Exception):
            raise response
        return response

    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]


class FakeExampleLibrary:
    """Example library backed by fixed names and background text."""

    def __init__(
        self,
        microservices: Optional[list[str]] = None,
        task_manager: Optional[list[str]] = None,
        background: str = "# Project background",
        error: Optional[Exception] = None,
    ) -> None:
        self.microservices = microservices or []
        self.task_manager = task_manager or []
        self.background = background
        self.error = error
        self.examples_loaded = 0

    def load_examples(self, include_microservices: bool = True, include_task_manager: bool = True) -> ExampleSet:
        if self.error is not None:
            raise self.error
        self.examples_loaded += 1
        return ExampleSet(
            microservice_examples=[ExampleWorkflow(name=name, workflow={}) for name in self.microservices],
            task_manager_examples=[ExampleWorkflow(name=name, workflow={}) for name in self.task_manager],
        )

    def load_background(self) -> str:
        return self.background


def workflow_hit(name: str, similarity: float, **data: Any) -> dict[str, Any]:
    """A ``search_workflows`` result entry with details nested under ``data``."""
    return {
        "name": name,
        "description": data.pop("description", f"{name} description"),
        "similarity": similarity,
        "id": data.pop("id", name.lower().replace(" ", "-")),
        "data": data,
    }


def node_hit(name: str, node_type: str, similarity: float = 0.8, **data: Any) -> dict[str, Any]:
    """A ``search_nodes`` result entry."""
    return {
        "name": name,
        "description": data.pop("description", f"{name} node"),
        "similarity": similarity,
        "data": {"node_type": node_type, **data},
    }
