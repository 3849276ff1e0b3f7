"""FastAPI application wiring Helius MCP tools to HTTP routes."""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from helius_mcp import mcp
from helius_mcp.config import default_config
from helius_mcp.helius_api import build_client
from helius_mcp.logging_setup import configure_logging
from helius_mcp.metrics import default_metrics
from helius_mcp.rate_limiter import PerKeyRateLimiter
from helius_mcp.tools import ToolResult

logger = logging.getLogger(__name__)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = mcp.SERVER_VERSION

configure_logging(default_config)
rate_limiter = PerKeyRateLimiter(
    rate_per_sec=default_config.rate_limit_qps,
    per_tool=default_config.per_tool_rate_limits,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.client = build_client(default_config)
    logger.info("helius client ready test_mode=%s", default_config.test_mode)
    yield
    await app.state.client.aclose()


app = FastAPI(
    title="Helius MCP Server",
    description="Solana RPC, Helius DAS, and Jito bundle tools for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


def _client_for(request: Request) -> Any:
    state = request.app.state
    client = getattr(state, "client", None)
    if client is None:
        # Lifespan is skipped when the app runs without a startup phase.
        client = build_client(default_config)
        state.client = client
    return client


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


def _log_tool_result(tool_name: str, result: ToolResult, request_id: Optional[str] = None) -> None:
    if result.is_error:
        kind = result.kind.value if result.kind is not None else None
        logger.warning(
            "tool=%s outcome=error kind=%s request_id=%s",
            tool_name,
            kind,
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": kind},
        )
    else:
        logger.info(
            "tool=%s outcome=success request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
    default_metrics.record_result(tool_name, result)


async def _enforce_rate_limit(tool_name: str) -> Optional[JSONResponse]:
    allowed = await rate_limiter.allow(tool_name)
    if not allowed:
        logger.warning("tool=%s outcome=rate_limited", tool_name, extra={"tool": tool_name})
        default_metrics.incr_rate_limited()
        return JSONResponse(
            status_code=429,
            content={"jsonrpc": "2.0", "error": {"code": 429, "message": "Rate limit exceeded"}},
            headers={"Retry-After": str(rate_limiter.retry_after(tool_name))},
        )
    return None


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.get("/tools")
async def tools_index() -> JSONResponse:
    return JSONResponse(content={"tools": mcp.list_tools()})


@app.post("/tools/{tool_name}")
async def tool_route(tool_name: str, request: Request) -> JSONResponse:
    """Invoke one tool; the JSON body (optional) is its arguments object."""
    if tool_name not in mcp.TOOL_REGISTRY:
        return JSONResponse(status_code=404, content={"error": f"Unknown tool: {tool_name}"})

    raw = await request.body()
    if raw:
        try:
            arguments = json.loads(raw)
        except ValueError:
            return JSONResponse(status_code=400, content={"error": "Request body must be JSON."})
    else:
        arguments = {}
    if not isinstance(arguments, dict):
        return JSONResponse(status_code=400, content={"error": "Arguments must be a JSON object."})

    limited = await _enforce_rate_limit(tool_name)
    if limited:
        return limited
    result = await mcp.call_tool(tool_name, arguments, client=_client_for(request))
    request_id = getattr(request.state, "request_id", None)
    _log_tool_result(tool_name, result, request_id)
    return JSONResponse(content=result.to_dict())


@app.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """
    JSON-RPC gateway for MCP clients.

    Supported methods:
      - initialize
      - tools/list (alias list_tools)
      - tools/call (alias call_tool)
      - notifications/initialized (no response body)
    """
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()

    def _respond(payload: Dict[str, Any], status_code: int = 200, *, method_label: Optional[str] = None) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        error = payload.get("error")
        error_code = error.get("code") if isinstance(error, dict) else None
        logger.debug(
            "mcp outcome=%s method=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            "error" if error_code is not None else "success",
            method_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"request_id": request_id, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload)

    try:
        body = await request.json()
    except ValueError:
        payload = mcp.jsonrpc_error(None, mcp.PARSE_ERROR, "Parse error")
        return _respond(payload, status_code=400)

    if not isinstance(body, dict):
        payload = mcp.jsonrpc_error(None, mcp.INVALID_REQUEST, "Invalid request")
        return _respond(payload, status_code=400)

    method = body.get("method")
    params = body.get("params")
    if method in ("tools/call", "call_tool") and isinstance(params, dict):
        try:
            tool_name, _ = mcp.tool_call_target(params)
        except mcp.JsonRpcError:
            tool_name = None
        if tool_name is not None:
            limited = await _enforce_rate_limit(tool_name)
            if limited:
                return limited
    elif method in ("tools/list", "list_tools"):
        limited = await _enforce_rate_limit("list_tools")
        if limited:
            return limited

    payload = await mcp.handle_message(
        body,
        client=_client_for(request),
        observer=lambda name, result: _log_tool_result(name, result, request_id),
    )
    if payload is None:
        return Response(status_code=204)
    return _respond(payload, method_label=method if isinstance(method, str) else None)


# Run with: uvicorn helius_mcp.server:app --reload
