"""
Tool registry, plus the JSON-RPC dispatch behind the HTTP ``/mcp`` gateway.

Tools never raise: every outcome comes back as a ``ToolResult`` envelope. The
only protocol-level failures produced here are JSON-RPC errors for malformed
requests and for unknown methods or tool names. The stdio transport shares
the registry but leaves the session protocol to the MCP SDK.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS
from mcp.types import LATEST_PROTOCOL_VERSION

from helius_mcp.tools import ALL_TOOLS, Operation, ToolResult

logger = logging.getLogger(__name__)

SERVER_NAME = "helius-mcp-server"
SERVER_VERSION = "0.1.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

TOOL_REGISTRY: Dict[str, Operation] = {tool.name: tool for tool in ALL_TOOLS}

ToolObserver = Callable[[str, ToolResult], None]


class ToolNotFoundError(LookupError):
    """Raised when a tool name is not registered."""


class JsonRpcError(Exception):
    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def list_tools() -> List[Dict[str, Any]]:
    """Return the tool catalogue in registration order."""
    return [tool.describe() for tool in TOOL_REGISTRY.values()]


async def call_tool(
    tool_name: str, arguments: Optional[Mapping[str, Any]] = None, *, client: Any
) -> ToolResult:
    """Dispatch to a tool by name."""
    tool = TOOL_REGISTRY.get(tool_name)
    if tool is None:
        raise ToolNotFoundError(tool_name)
    return await tool(arguments or {}, client=client)


def jsonrpc_success(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def jsonrpc_error(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


def tool_call_target(params: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Extract the tool name and arguments from ``tools/call`` params."""
    tool_name = params.get("name") or params.get("tool")
    arguments = params.get("arguments")
    if arguments is None:
        arguments = params.get("params") or {}
    if not isinstance(tool_name, str) or not tool_name.strip():
        raise JsonRpcError(INVALID_PARAMS, "Invalid params")
    if not isinstance(arguments, dict):
        raise JsonRpcError(INVALID_PARAMS, "Invalid params")
    return tool_name, arguments


def _initialize(params: Mapping[str, Any]) -> Dict[str, Any]:
    protocol_version = params.get("protocolVersion")
    if not isinstance(protocol_version, str) or not protocol_version:
        raise JsonRpcError(INVALID_PARAMS, "Invalid params")
    # Unknown versions are answered with ours; the client decides whether to continue.
    negotiated = protocol_version if protocol_version in SUPPORTED_PROTOCOL_VERSIONS else LATEST_PROTOCOL_VERSION
    logger.debug("mcp initialize requested protocol=%s negotiated=%s", protocol_version, negotiated)
    return {
        "protocolVersion": negotiated,
        "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
        "capabilities": {"tools": {"listChanged": False}},
    }


async def _dispatch(
    method: str,
    params: Mapping[str, Any],
    *,
    client: Any,
    observer: Optional[ToolObserver],
) -> Any:
    if method == "initialize":
        return _initialize(params)

    if method == "ping":
        return {}

    if method in ("tools/list", "list_tools"):
        return {"tools": list_tools()}

    if method in ("tools/call", "call_tool"):
        tool_name, arguments = tool_call_target(params)
        try:
            result = await call_tool(tool_name, arguments, client=client)
        except ToolNotFoundError:
            logger.warning("mcp unknown tool=%s", tool_name, extra={"tool": tool_name})
            raise JsonRpcError(METHOD_NOT_FOUND, "Method not found") from None
        if observer is not None:
            observer(tool_name, result)
        return result.to_dict()

    raise JsonRpcError(METHOD_NOT_FOUND, "Method not found")


async def handle_message(
    body: Any,
    *,
    client: Any,
    observer: Optional[ToolObserver] = None,
) -> Optional[Dict[str, Any]]:
    """
    Process one decoded JSON-RPC message.

    Returns the response payload, or ``None`` for notifications, which never
    get a reply. ``observer`` is told about every tool outcome so a transport
    can log and count it.
    """
    if not isinstance(body, dict):
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid request")

    method = body.get("method")
    rpc_id = body.get("id")
    raw_params = body.get("params")

    if method == "initialized" or (isinstance(method, str) and method.startswith("notifications/")):
        logger.debug("mcp notification received method=%s", method)
        return None

    if raw_params is None:
        params: Mapping[str, Any] = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        return jsonrpc_error(rpc_id, INVALID_PARAMS, "Invalid params")

    if not isinstance(method, str) or not method:
        return jsonrpc_error(rpc_id, INVALID_REQUEST, "Invalid request")

    try:
        result = await _dispatch(method, params, client=client, observer=observer)
    except JsonRpcError as exc:
        return jsonrpc_error(rpc_id, exc.code, exc.message)
    return jsonrpc_success(rpc_id, result)
