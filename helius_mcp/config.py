"""
Configuration helpers for the Helius MCP server.

This module centralizes RPC URL selection, API key loading, default timeouts,
the mock-client switch, and rate limits. No secrets are stored in the
repository; the API key is read from environment or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

# API key handling
API_KEY_ENV_VAR = "HELIUS_API_KEY"
API_KEY_FILE_ENV_VAR = "HELIUS_API_KEY_FILE"
DEFAULT_API_KEY_FILE = "apikey.txt"

# Connection settings
NETWORK = os.getenv("HELIUS_NETWORK", "mainnet")
RPC_URL_OVERRIDE = os.getenv("HELIUS_RPC_URL")
DEFAULT_JITO_API_URL = os.getenv("JITO_API_URL", "https://mainnet.block-engine.jito.wtf")

TRUTHY = {"1", "true", "yes", "y"}


def _load_timeout() -> float:
    raw_timeout = os.getenv("HELIUS_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


def _load_rate_limit() -> float:
    raw = os.getenv("HELIUS_MCP_RATE_LIMIT_QPS")
    if raw:
        try:
            return float(raw)
        except ValueError:
            return DEFAULT_RATE_LIMIT_QPS
    return DEFAULT_RATE_LIMIT_QPS


def _parse_tool_rate_limits(raw: Optional[str]) -> Dict[str, float]:
    """Parse ``tool=qps,tool=qps`` into a mapping, skipping malformed entries."""
    limits: Dict[str, float] = {}
    if not raw:
        return limits
    for chunk in raw.split(","):
        name, sep, value = chunk.partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        try:
            limits[name] = float(value)
        except ValueError:
            continue
    return limits


def is_test_mode() -> bool:
    return os.getenv("TEST_MODE", "").strip().lower() in TRUTHY


DEFAULT_TIMEOUT = _load_timeout()
DEFAULT_RATE_LIMIT_QPS = 10.0
RATE_LIMIT_QPS = _load_rate_limit()
LOG_LEVEL = os.getenv("HELIUS_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("HELIUS_MCP_LOG_FORMAT", "json")  # json or plain
PER_TOOL_RATE_LIMITS = _parse_tool_rate_limits(os.getenv("HELIUS_MCP_TOOL_RATE_LIMITS"))


def load_api_key() -> Optional[str]:
    """
    Load the Helius API key from environment or a local file.

    Returns:
        The API key string if available, otherwise None. The key is never logged
        or returned to callers.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR, DEFAULT_API_KEY_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


def build_rpc_url(network: str, api_key: Optional[str]) -> str:
    """Return the Helius RPC endpoint for a network, with the key as a query param."""
    base = f"https://{network}.helius-rpc.com/"
    if api_key:
        return f"{base}?api-key={api_key}"
    return base


@dataclass(slots=True)
class HeliusConfig:
    """Runtime configuration for Helius access."""

    api_key: Optional[str] = field(default_factory=load_api_key)
    network: str = NETWORK
    rpc_url: Optional[str] = RPC_URL_OVERRIDE
    timeout: float = DEFAULT_TIMEOUT
    test_mode: bool = field(default_factory=is_test_mode)
    jito_api_url: str = DEFAULT_JITO_API_URL
    rate_limit_qps: float = RATE_LIMIT_QPS
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT
    per_tool_rate_limits: Dict[str, float] = field(
        default_factory=lambda: dict(PER_TOOL_RATE_LIMITS)
    )

    @property
    def endpoint(self) -> str:
        """Effective RPC URL; an explicit override wins over the network default."""
        if self.rpc_url:
            return self.rpc_url
        return build_rpc_url(self.network, self.api_key)


default_config = HeliusConfig()
