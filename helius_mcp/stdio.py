"""MCP over stdin/stdout, served by the SDK's low-level server."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from helius_mcp.config import HeliusConfig, default_config
from helius_mcp.helius_api import build_client
from helius_mcp.logging_setup import configure_logging
from helius_mcp.mcp import SERVER_NAME, SERVER_VERSION, ToolNotFoundError, call_tool, list_tools
from helius_mcp.metrics import default_metrics
from helius_mcp.tools import ToolResult

logger = logging.getLogger(__name__)


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        isError=result.is_error,
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
    )


def _record(tool_name: str, result: ToolResult) -> None:
    kind = result.kind.value if result.kind is not None else None
    default_metrics.record_result(tool_name, result)
    logger.info(
        "tool=%s outcome=%s kind=%s",
        tool_name,
        "error" if result.is_error else "success",
        kind,
        extra={"tool": tool_name},
    )


def build_server(client: Any) -> Server:
    """
    Wire the tool registry into an MCP server bound to ``client``.

    The SDK owns the session: initialize and version negotiation, ping and
    notifications. Tool input is checked by each tool, not by the SDK, so
    a bad address still comes back as a tool-level error envelope.
    """
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=entry["name"], description=entry["description"], inputSchema=entry["inputSchema"])
            for entry in list_tools()
        ]

    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        try:
            result = await call_tool(name, arguments, client=client)
        except ToolNotFoundError:
            logger.warning("mcp unknown tool=%s", name, extra={"tool": name})
            return types.CallToolResult(
                isError=True,
                content=[types.TextContent(type="text", text=f"Unknown tool: {name}")],
            )
        _record(name, result)
        return to_call_tool_result(result)

    return server


async def main(config: HeliusConfig = default_config) -> None:
    configure_logging(config)
    client = build_client(config)
    server = build_server(client)
    logger.info("Helius MCP server running on stdio test_mode=%s", config.test_mode)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
