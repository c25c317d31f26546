"""Custom exceptions for n8nforge."""

from pathlib import Path
from typing import Optional, Union


class ForgeError(Exception):
    """Base exception for all n8nforge errors."""

    kind = "forge_error"


class RetrievalUnavailableError(ForgeError):
    """The retrieval process failed, timed out, or returned malformed output."""

    kind = "retrieval_unavailable"

    def __init__(self, message: str, method: Optional[str] = None, stderr: Optional[str] = None):
        self.method = method
        self.stderr = stderr or ""

        if method:
            message = f"{message}\nRetrieval method: {method}"
        if self.stderr:
            message = f"{message}\nstderr: {self.stderr.strip()[:500]}"

        super().__init__(message)


class MalformedInputError(ForgeError):
    """A required field is missing or has the wrong type."""

    kind = "malformed_input"

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class ResourceMissingError(ForgeError):
    """An example workflow or the background document could not be loaded."""

    kind = "resource_missing"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = str(path) if path is not None else None
        super().__init__(message)
