"""Clients for the Helius / Solana RPC surface."""

from __future__ import annotations

from helius_mcp.config import HeliusConfig, default_config

from .client import (
    HeliusApiError,
    HeliusRpcClient,
    NodeUnreachableError,
    RateLimitedError,
    RpcError,
    UnauthorizedError,
)
from .mock import MockHeliusClient


def build_client(config: HeliusConfig | None = None) -> HeliusRpcClient | MockHeliusClient:
    """Return the mock client in test mode, otherwise the live RPC client."""
    config = config or default_config
    if config.test_mode:
        return MockHeliusClient()
    return HeliusRpcClient(config)


__all__ = [
    "HeliusRpcClient",
    "MockHeliusClient",
    "HeliusApiError",
    "RpcError",
    "UnauthorizedError",
    "RateLimitedError",
    "NodeUnreachableError",
    "build_client",
]
