"""Example demonstrating MCP Server usage."""

import asyncio
import logging

from voice_tasks.interpretation.mcp_server import MCPServer

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    """Demonstrate MCP Server functionality."""
    mcp_server = MCPServer()
    await mcp_server.initialize()

    print("Available MCP tools:", mcp_server.get_available_tools())
    print()

    # Example 1: Reminder with a time of day
    print("=== Parsing a reminder ===")
    result = await mcp_server.handle_parse_transcript(
        {"transcript": "remind me to call the bank tomorrow morning"}
    )
    print(f"Parse result: {result}")
    print()

    # Example 2: Priority and weekday
    print("=== Parsing an urgent task ===")
    result = await mcp_server.handle_parse_transcript(
        {"transcript": "urgent: finish the report by friday"}
    )
    print(f"Parse result: {result}")
    print()

    # Example 3: Status
    print("=== Parsing a task already under way ===")
    result = await mcp_server.handle_parse_transcript(
        {"transcript": "working on the deploy script, low priority"}
    )
    print(f"Parse result: {result}")
    print()

    # Example 4: Rejected input
    print("=== Parsing a blank transcript ===")
    result = await mcp_server.handle_parse_transcript({"transcript": "   "})
    print(f"Parse result: {result}")

    await mcp_server.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
