"""Tool-result envelope and error conversion for the MCP server.

Every tool answers with the same envelope::

    {"content": [{"type": "text", "text": "<JSON payload>"}], "isError": true?}

Services never raise. Failures become an envelope whose payload carries a
message, an error kind tag and tool-specific details. The tool layer hands
error envelopes to FastMCP as ``ToolError`` so the result is flagged.
"""

import json
import logging
from typing import Any, Optional

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from n8nforge.core.exceptions import ForgeError, MalformedInputError

logger = logging.getLogger(__name__)


class TextContent(BaseModel):
    type: str = "text"
    text: str


class ToolCallResult(BaseModel):
    """Result of one tool call."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: Optional[bool] = Field(default=None, alias="isError")

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    @property
    def payload(self) -> Any:
        """Decoded JSON payload of the first content item."""
        return json.loads(self.content[0].text)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def success_result(payload: Any) -> ToolCallResult:
    """Wrap a JSON-serializable payload in a success envelope."""
    return ToolCallResult(content=[TextContent(text=json.dumps(payload, indent=2))])


def error_kind(error: Exception) -> str:
    """Tag identifying the error category."""
    if isinstance(error, ForgeError):
        return error.kind
    if isinstance(error, ValidationError):
        return MalformedInputError.kind
    return "internal_error"


def error_result(error: Exception, details: str) -> ToolCallResult:
    """Convert an exception into an error envelope.

    Args:
        error: The exception raised while handling the tool call
        details: Short description of what the tool was doing

    Returns:
        Envelope flagged with ``isError`` carrying message, kind and details
    """
    kind = error_kind(error)
    if kind == "internal_error":
        logger.error(f"Unexpected error: {details}", exc_info=error)
    else:
        logger.warning(f"{details}: {error}")

    payload = {"error": str(error) or error.__class__.__name__, "kind": kind, "details": details}
    return ToolCallResult(content=[TextContent(text=json.dumps(payload))], is_error=True)


def tool_text(result: ToolCallResult) -> str:
    """Text for FastMCP to return; error envelopes are raised as ``ToolError``.

    FastMCP turns a raised ``ToolError`` into a result flagged ``isError``
    whose text is the error payload.
    """
    if result.is_error:
        raise ToolError(result.text)
    return result.text
