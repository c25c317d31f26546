"""Command line interface for n8nforge.

Every command except ``serve`` calls the same service the matching MCP tool
uses and prints the tool payload. Error payloads go to stderr with exit
code 1.
"""

import sys
from typing import Optional

import click

from n8nforge.mcp_server.services import GeneratorService, RagService
from n8nforge.mcp_server.utils.errors import ToolCallResult

from .logging_config import configure_logging

COMPLEXITIES = ["simple", "intermediate", "advanced"]


def _emit(result: ToolCallResult) -> None:
    if result.is_error:
        click.echo(result.text, err=True)
        sys.exit(1)
    click.echo(result.text)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show progress logs")
@click.version_option(package_name="n8nforge")
def cli(verbose: bool) -> None:
    """Search n8n example workflows and prepare workflow drafts."""
    configure_logging(verbose)


@cli.command()
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
def serve(debug: bool) -> None:
    """Run the MCP server over stdio."""
    from n8nforge.mcp_server.main import main

    main(debug=debug)


@cli.command()
@click.argument("query")
@click.option("--limit", default=5, show_default=True, type=click.IntRange(min=1), help="Maximum workflows")
@click.option(
    "--threshold", default=0.5, show_default=True, type=click.FloatRange(0, 1), help="Similarity threshold"
)
@click.option("--include-nodes", is_flag=True, help="Also suggest nodes")
def search(query: str, limit: int, threshold: float, include_nodes: bool) -> None:
    """Search example workflows similar to QUERY.

    Example:
        n8nforge search "telegram bot with AI memory" --include-nodes
    """
    _emit(RagService.search_workflows(query, limit=limit, threshold=threshold, include_nodes=include_nodes))


@cli.command()
@click.argument("query")
def insights(query: str) -> None:
    """Summarize matching workflows, nodes and considerations for QUERY."""
    _emit(RagService.get_insights(query))


@cli.command()
@click.argument("description")
@click.option(
    "--trigger", type=click.Choice(["webhook", "schedule", "manual", "chat"]), help="Trigger kind for the draft"
)
@click.option("--integration", "integrations", multiple=True, help="Integration to add (repeatable)")
@click.option("--complexity", type=click.Choice(COMPLEXITIES), help="Desired complexity")
@click.option("--examples-limit", default=3, show_default=True, type=click.IntRange(min=1))
def draft(
    description: str,
    trigger: Optional[str],
    integrations: tuple[str, ...],
    complexity: Optional[str],
    examples_limit: int,
) -> None:
    """Draft a workflow node graph for DESCRIPTION.

    Example:
        n8nforge draft "notify slack on new form submission" --trigger webhook --integration slack
    """
    requirements: dict = {}
    if trigger:
        requirements["trigger"] = trigger
    if integrations:
        requirements["integrations"] = list(integrations)
    if complexity:
        requirements["complexity"] = complexity

    _emit(RagService.generate_workflow(description, requirements or None, examples_limit=examples_limit))


@cli.command()
@click.argument("description")
@click.option("--feature", "features", multiple=True, required=True, help="Required feature (repeatable)")
@click.option(
    "--output-format",
    type=click.Choice(["single", "microservices"]),
    default="single",
    show_default=True,
)
@click.option("--task-manager", is_flag=True, help="Use the Task Manager pattern")
@click.option("--complexity", type=click.Choice(COMPLEXITIES), default="intermediate", show_default=True)
@click.option("--prompt-only", is_flag=True, help="Print only the generation prompt")
def generate(
    description: str,
    features: tuple[str, ...],
    output_format: str,
    task_manager: bool,
    complexity: str,
    prompt_only: bool,
) -> None:
    """Prepare the generation prompt and plan for a complete workflow."""
    result = GeneratorService.generate_complete_workflow(
        description,
        list(features),
        use_task_manager=task_manager,
        output_format=output_format,
        complexity=complexity,
    )
    if prompt_only and not result.is_error:
        click.echo(result.payload["prompt"])
        return
    _emit(result)


if __name__ == "__main__":
    cli()
