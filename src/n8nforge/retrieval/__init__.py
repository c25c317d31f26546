"""Access to the external retrieval service and example documents."""

from .client import RETRIEVAL_METHODS, Retriever, SubprocessRetriever
from .documents import ExampleLibrary

__all__ = ["RETRIEVAL_METHODS", "ExampleLibrary", "Retriever", "SubprocessRetriever"]
