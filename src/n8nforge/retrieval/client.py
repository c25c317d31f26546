"""Retrieval client for the semantic workflow/node search service.

The search service is an external Python process (``rag_client_wrapper.py``)
invoked once per call as::

    <python> rag_client_wrapper.py <method> '<json params>'

and answering with JSON on stdout. Everything above this module depends only
on the ``Retriever`` protocol, so an in-process index can replace the
subprocess without touching the planning code.
"""

import json
import logging
import os
import subprocess
from typing import Any, Optional, Protocol

from n8nforge.core.exceptions import RetrievalUnavailableError
from n8nforge.core.settings import ForgeSettings, load_settings

logger = logging.getLogger(__name__)

RETRIEVAL_METHODS = frozenset({"search_workflows", "search_nodes", "query_insights", "build_generation_context"})


class Retriever(Protocol):
    """Anything that can answer a retrieval method call."""

    def call(self, method: str, params: dict[str, Any]) -> Any: ...


class SubprocessRetriever:
    """Runs the retrieval wrapper script in a subprocess for every call."""

    def __init__(self, settings: Optional[ForgeSettings] = None) -> None:
        self.settings = settings or load_settings()

    def build_command(self, method: str, params: dict[str, Any]) -> list[str]:
        return [
            str(self.settings.interpreter),
            str(self.settings.retrieval_script_path),
            method,
            json.dumps(params),
        ]

    def call(self, method: str, params: dict[str, Any]) -> Any:
        """Invoke one retrieval method and return its decoded JSON output.

        Raises:
            RetrievalUnavailableError: If the method is unknown, the process
                cannot start, times out, exits non-zero, or prints non-JSON
        """
        if method not in RETRIEVAL_METHODS:
            raise RetrievalUnavailableError(f"Unknown retrieval method '{method}'", method=method)

        project_root = str(self.settings.project_root)
        env = {**os.environ, "PYTHONPATH": project_root}
        command = self.build_command(method, params)

        logger.debug(f"Calling retrieval method {method}", extra={"params": params, "cwd": project_root})

        try:
            result = subprocess.run(  # noqa: S603
                command,
                cwd=project_root,
                env=env,
                capture_output=True,
                text=True,
                shell=False,
                timeout=self.settings.retrieval_timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise RetrievalUnavailableError(
                f"Retrieval timed out after {self.settings.retrieval_timeout} seconds", method=method
            ) from e
        except OSError as e:
            raise RetrievalUnavailableError(f"Failed to start retrieval process: {e}", method=method) from e

        if result.returncode != 0:
            raise RetrievalUnavailableError(
                f"Retrieval process failed with code {result.returncode}", method=method, stderr=result.stderr
            )

        try:
            decoded = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise RetrievalUnavailableError(
                f"Retrieval process returned invalid JSON: {e}", method=method, stderr=result.stderr
            ) from e

        logger.info(f"Retrieval method {method} completed")
        return decoded
