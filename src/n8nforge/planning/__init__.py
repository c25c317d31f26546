"""Workflow-graph synthesis: context formatting, drafting, prompt assembly and insights.

The pure functions live in their own modules (graph_builder,
context_formatter, prompt_assembler, implementation_steps, insights).
PocketFlow pipelines that add retrieval around them are in ``flow``.
"""
