"""Minimal sanity checks for the Helius MCP tools (uses TEST_MODE to pick the client)."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from helius_mcp.config import default_config  # noqa: E402
from helius_mcp.helius_api import build_client  # noqa: E402
from helius_mcp.mcp import call_tool  # noqa: E402

# Default to a well-known mainnet wallet; override via env.
SAMPLE_ADDRESS = os.getenv("HELIUS_SAMPLE_ADDRESS", "GsbwXfJraMomNxBcjK7xK2xQx5MQgQx8Kb71Wkgwq1Bi")
# Opt-in to DAS lookups in the sanity check (heavier on credits).
RUN_DAS = os.getenv("RUN_DAS_SANITY", "false").lower() in {"1", "true", "yes"}


async def _show(name: str, arguments: dict, client) -> None:
    result = await call_tool(name, arguments, client=client)
    status = "error" if result.is_error else "ok"
    print(f"{name} [{status}]: {result.text}")


async def main() -> None:
    client = build_client(default_config)
    try:
        await _show("helius_get_health", {}, client)
        await _show("helius_get_slot", {}, client)
        await _show("helius_get_epoch_info", {}, client)
        await _show("helius_get_balance", {"publicKey": SAMPLE_ADDRESS}, client)
        await _show("helius_get_latest_blockhash", {}, client)
        await _show("helius_get_signatures_for_address", {"address": SAMPLE_ADDRESS, "limit": 3}, client)
        if RUN_DAS:
            await _show("helius_get_assets_by_owner", {"owner": SAMPLE_ADDRESS, "limit": 2}, client)
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
