"""Tool declarations for the Helius MCP server."""

from .accounts import ACCOUNT_TOOLS
from .assets import ASSET_TOOLS
from .blocks import BLOCK_TOOLS
from .bundles import BUNDLE_TOOLS
from .envelope import ErrorKind, TextContent, ToolResult, build_failure, build_success
from .network import NETWORK_TOOLS
from .operation import Operation
from .tokens import TOKEN_TOOLS
from .transactions import TRANSACTION_TOOLS
from .validators import is_valid_public_key, validate_public_key, validate_public_keys

ALL_TOOLS = [
    *ACCOUNT_TOOLS,
    *TOKEN_TOOLS,
    *BLOCK_TOOLS,
    *TRANSACTION_TOOLS,
    *NETWORK_TOOLS,
    *ASSET_TOOLS,
    *BUNDLE_TOOLS,
]

__all__ = [
    "ALL_TOOLS",
    "ErrorKind",
    "Operation",
    "TextContent",
    "ToolResult",
    "build_failure",
    "build_success",
    "is_valid_public_key",
    "validate_public_key",
    "validate_public_keys",
]
