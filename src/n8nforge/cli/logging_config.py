"""Centralized logging configuration for CLI commands."""

import logging
import os


def configure_logging(verbose: bool) -> None:
    """Configure logging levels based on verbose flag.

    Called once at CLI startup before any command runs.

    Args:
        verbose: If True, show INFO+ logs. If False, show only WARNING+ logs.
    """
    # Tests manage their own logging
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    level = logging.INFO if verbose else logging.WARNING
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    else:
        logging.getLogger().setLevel(level)

    # The MCP SDK logs every request at INFO
    for logger_name in ["mcp", "asyncio"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    if not verbose:
        logging.getLogger("n8nforge").setLevel(logging.WARNING)
