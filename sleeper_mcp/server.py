"""MCP server for the Sleeper fantasy API.

Every tool is one GET against https://api.sleeper.app/v1; the JSON body is
passed back to the agent as pretty-printed text.

Run with: python mcp_server.py
Or, once installed: sleeper-mcp
"""

import argparse
import asyncio
import json
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from sleeper_mcp.config import settings
from sleeper_mcp.config.logging_config import get_logger, setup_logging
from sleeper_mcp.integrations.sleeper_api import SleeperAPIClient, SleeperAPIError
from sleeper_mcp.tools.catalog import list_tools
from sleeper_mcp.tools.dispatch import build_request

logger = get_logger(__name__)


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error
    )


class SleeperMCPServer:
    """Binds the tool catalog and dispatcher to an MCP Server instance."""

    def __init__(
        self,
        client: Optional[SleeperAPIClient] = None,
        name: Optional[str] = None,
        version: Optional[str] = None,
    ):
        self.client = client or SleeperAPIClient()
        self.server = Server(name or settings.app_name, version=version or settings.app_version)
        self._register_handlers()

    def _register_handlers(self) -> None:
        @self.server.list_tools()
        async def handle_list_tools() -> List[Tool]:
            return self.list_tools()

        async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
            result = await self.call_tool(req.params.name, req.params.arguments)
            return types.ServerResult(result)

        # Registered without the call_tool() decorator, which turns every
        # exception (McpError included) into an isError result. Unknown tools
        # must reach the client as a protocol error.
        self.server.request_handlers[types.CallToolRequest] = handle_call_tool

    def list_tools(self) -> List[Tool]:
        return list_tools()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """Run one tool: build its request, GET it, wrap the body.

        Raises:
            McpError: Unknown tool name or missing required argument
        """
        endpoint, params = build_request(name, arguments)
        logger.debug("tool_call", tool=name, endpoint=endpoint, params=params)

        try:
            data = await self.client.get(endpoint, params=params)
        except SleeperAPIError as e:
            return _text_result(f"Sleeper API error: {e.message}", is_error=True)

        return _text_result(json.dumps(data, indent=2))


async def main(base_url: Optional[str] = None) -> None:
    """Run the MCP server over stdio until the session ends."""
    async with SleeperAPIClient(base_url=base_url) as client:
        sleeper = SleeperMCPServer(client)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("server_started", transport="stdio", base_url=client.base_url)
            await sleeper.server.run(
                read_stream,
                write_stream,
                sleeper.server.create_initialization_options()
            )


def run(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    parser = argparse.ArgumentParser(description="Sleeper fantasy API MCP server (stdio)")
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level (default: {settings.log_level})"
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help=f"Sleeper API root (default: {settings.base_url})"
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    try:
        asyncio.run(main(base_url=args.base_url))
    except KeyboardInterrupt:
        logger.info("server_interrupted")
    return 0
