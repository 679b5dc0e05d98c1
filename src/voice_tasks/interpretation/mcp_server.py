"""MCP Server exposing transcript interpretation using FastMCP."""

import logging
import sys
from typing import Any

from fastmcp import FastMCP

from ..logging_utils import configure_logging
from .config import DEFAULT_MCP_HOST, DEFAULT_MCP_PORT, DEFAULT_MCP_SERVER_NAME
from .exceptions import InterpretationError
from .interpretation_service import TranscriptInterpretationService

logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(DEFAULT_MCP_SERVER_NAME)

_service: TranscriptInterpretationService | None = None


def get_service() -> TranscriptInterpretationService:
    """Get the interpretation service, creating the default one on first use."""
    global _service
    if _service is None:
        _service = TranscriptInterpretationService()
    return _service


def set_service(service: TranscriptInterpretationService | None) -> None:
    """Set the interpretation service instance (for testing)."""
    global _service
    _service = service


async def _parse_transcript_impl(transcript: Any) -> dict[str, Any]:
    """Implementation of parse_transcript tool."""
    try:
        task = get_service().parse(transcript)
        return {"success": True, "task": task.to_dict()}

    except InterpretationError as e:
        logger.warning(f"Could not parse transcript: {e}")
        return {"success": False, "error": str(e)}


@mcp.tool()
async def parse_transcript(transcript: str) -> dict[str, Any]:
    """
    Turn a spoken task description into a structured task draft.

    Args:
        transcript: Transcribed speech, e.g. "remind me to call the bank tomorrow morning"

    Returns:
        Dictionary with success flag and the task (title, description, status,
        priority, dueDate, transcript)
    """
    return await _parse_transcript_impl(transcript)


# Compatibility wrapper for tests
class MCPServer:
    """
    Compatibility wrapper for testing.

    The actual MCP server uses FastMCP with function decorators.
    This class provides a plain interface over the same tool implementations.
    """

    def __init__(
        self,
        service: TranscriptInterpretationService | None = None,
        server_name: str = DEFAULT_MCP_SERVER_NAME,
        host: str = DEFAULT_MCP_HOST,
        port: int = DEFAULT_MCP_PORT,
    ) -> None:
        """Initialize MCP Server wrapper."""
        self._service = service or TranscriptInterpretationService()
        self._server_name = server_name
        self._host = host
        self._port = port
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize the server."""
        set_service(self._service)
        self._initialized = True

    async def shutdown(self) -> None:
        """Shutdown the server."""
        set_service(None)
        self._initialized = False

    def get_available_tools(self) -> list[str]:
        """Get list of available tools."""
        return ["parse_transcript"]

    async def handle_parse_transcript(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle parse_transcript request."""
        if "transcript" not in params:
            return {"success": False, "error": "Missing required field: transcript"}
        return await _parse_transcript_impl(params["transcript"])


def cli_entry() -> None:
    """CLI entry point for the MCP server."""
    configure_logging()

    transport_type = "stdio"
    if len(sys.argv) > 1 and sys.argv[1] in ("stdio", "sse", "http"):
        transport_type = "sse" if sys.argv[1] == "http" else sys.argv[1]

    logger.info(f"MCP Server initialized with 1 tool (transport={transport_type})")

    if transport_type == "stdio":
        mcp.run(transport="stdio")
    else:
        logger.info(f"Server will listen on http://{DEFAULT_MCP_HOST}:{DEFAULT_MCP_PORT}")
        mcp.run(transport="sse", host=DEFAULT_MCP_HOST, port=DEFAULT_MCP_PORT)


if __name__ == "__main__":
    cli_entry()
