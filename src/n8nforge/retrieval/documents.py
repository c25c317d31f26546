"""Loading of example workflows and the project background document."""

import json
import logging
from pathlib import Path
from typing import Optional

from n8nforge.core.exceptions import ResourceMissingError
from n8nforge.core.settings import ForgeSettings, load_settings
from n8nforge.planning.ir_models import ExampleSet, ExampleWorkflow

logger = logging.getLogger(__name__)


class ExampleLibrary:
    """Reads example workflow folders and the background document from the project root."""

    def __init__(self, settings: Optional[ForgeSettings] = None) -> None:
        self.settings = settings or load_settings()

    def _load_directory(self, directory: Path) -> list[ExampleWorkflow]:
        if not directory.is_dir():
            raise ResourceMissingError(f"Example directory not found: {directory}", path=directory)

        examples = []
        for path in sorted(directory.glob("*.json")):
            try:
                workflow = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                raise ResourceMissingError(f"Could not load example workflow {path.name}: {e}", path=path) from e
            examples.append(ExampleWorkflow(name=path.name, workflow=workflow))

        logger.debug(f"Loaded {len(examples)} examples from {directory}")
        return examples

    def load_examples(self, include_microservices: bool = True, include_task_manager: bool = True) -> ExampleSet:
        """Load the requested example groups.

        Raises:
            ResourceMissingError: If a requested folder is missing or holds invalid JSON
        """
        root = self.settings.project_root
        microservice_examples = (
            self._load_directory(root / self.settings.microservice_examples_dir) if include_microservices else []
        )
        task_manager_examples = (
            self._load_directory(root / self.settings.task_manager_examples_dir) if include_task_manager else []
        )
        return ExampleSet(microservice_examples=microservice_examples, task_manager_examples=task_manager_examples)

    def load_background(self) -> str:
        """Read the background context document.

        Raises:
            ResourceMissingError: If the document cannot be read
        """
        path = self.settings.background_path
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise ResourceMissingError(f"Background document not found: {path}", path=path) from e
