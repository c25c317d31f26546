"""n8nforge CLI module."""

from .main import cli

__all__ = ["cli"]
