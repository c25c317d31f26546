"""Main entry point for the n8nforge MCP server.

This module provides the run_server function that starts the MCP server
with stdio transport. It handles signal handlers for graceful shutdown
and ensures proper logging configuration.
"""

import logging
import signal
import sys
from types import FrameType
from typing import Optional

from .server import mcp, register_tools

# Configure logging to stderr (stdout is reserved for protocol messages)
logger = logging.getLogger(__name__)


def run_server() -> None:
    """Run the n8nforge MCP server with stdio transport.

    The server uses stdio transport where:
    - stdin: Receives JSON-RPC requests from the client
    - stdout: Sends JSON-RPC responses to the client
    - stderr: All logging output

    Note: This function is synchronous because FastMCP manages
    its own event loop when using stdio transport.
    """
    register_tools()

    def handle_shutdown(signum: int, frame: Optional[FrameType]) -> None:
        """Handle shutdown signals gracefully."""
        logger.info(f"Received signal {signum}, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    logger.info("Starting n8nforge MCP server with stdio transport...")

    try:
        # Blocks until the client disconnects
        mcp.run("stdio")
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"MCP server error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("MCP server shutdown complete")


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the MCP server.

    All logs go to stderr to keep stdout clean for protocol messages.
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)
        logging.getLogger("mcp").setLevel(logging.WARNING)


def main(debug: bool = False) -> None:
    """Configure logging and run the server.

    Args:
        debug: Enable debug logging if True
    """
    configure_logging(debug)
    run_server()


__all__ = ["configure_logging", "main", "run_server"]
