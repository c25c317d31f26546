"""Base service layer for enforcing stateless pattern.

This module provides the base class and utilities for ensuring
all services follow the stateless pattern with fresh instances
per request.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from n8nforge.core.settings import load_settings
from n8nforge.retrieval.client import Retriever, SubprocessRetriever
from n8nforge.retrieval.documents import ExampleLibrary

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for all MCP services.

    Enforces the stateless pattern by preventing instance reuse.
    All service methods are class methods that build their collaborators
    per request (or use the ones injected by the caller).
    """

    def __init__(self) -> None:
        """Initialize service - should not store state."""
        # This init is here to catch accidental instance creation
        logger.debug(f"Creating {self.__class__.__name__} instance")

    @classmethod
    def create_fresh_instances(
        cls,
        retriever: Optional[Retriever] = None,
        example_library: Optional[ExampleLibrary] = None,
    ) -> dict[str, Any]:
        """Create fresh collaborators for one request.

        Injected instances are used as-is; missing ones are built from the
        current settings.

        Returns:
            Dictionary with ``retriever`` and ``example_library``
        """
        if retriever is not None and example_library is not None:
            return {"retriever": retriever, "example_library": example_library}

        settings = load_settings()
        return {
            "retriever": retriever or SubprocessRetriever(settings),
            "example_library": example_library or ExampleLibrary(settings),
        }

    @classmethod
    def validate_stateless(cls) -> bool:
        """Validate that the service follows stateless pattern.

        Returns:
            True if service is stateless, False otherwise
        """
        instance = cls()
        instance_vars = vars(instance)

        # Should have no instance variables (empty __dict__)
        if instance_vars:
            logger.warning(f"{cls.__name__} has instance variables: {list(instance_vars.keys())}")
            return False

        return True


def ensure_stateless(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator to ensure function creates fresh instances.

    This decorator logs instance creation to help debug
    stateless pattern violations.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        logger.debug(f"Executing {func.__name__} with fresh instances")
        result = func(*args, **kwargs)
        logger.debug(f"Completed {func.__name__}")
        return result

    return wrapper
