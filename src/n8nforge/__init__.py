"""n8nforge: draft n8n workflows from natural language with retrieved examples."""

__version__ = "0.1.0"
