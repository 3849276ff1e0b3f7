"""Shared validation helpers for Helius MCP tools."""

from __future__ import annotations

import re
from typing import Any, List

from solders.pubkey import Pubkey

from helius_mcp.tools.envelope import ErrorKind, ToolResult, build_failure

# Solana public keys are 32 bytes, which Base58 renders in 32-44 characters.
BASE58_REGEX = re.compile(r"^[1-9A-HJ-NP-Za-km-z]+$")
PUBLIC_KEY_MIN_LENGTH = 32
PUBLIC_KEY_MAX_LENGTH = 44


def validate_public_key(value: Any) -> Pubkey | ToolResult:
    """
    Parse a Base58 public key.

    Returns the parsed ``Pubkey`` on success, otherwise a validation failure
    envelope that callers can return as-is. Never raises.
    """
    if not isinstance(value, str) or not value:
        return build_failure(f"Invalid public key: {value}", kind=ErrorKind.VALIDATION)
    try:
        return Pubkey.from_string(value)
    except (TypeError, ValueError):
        return build_failure(f"Invalid public key: {value}", kind=ErrorKind.VALIDATION)


def validate_public_keys(values: Any) -> List[Pubkey] | ToolResult:
    """Validate a list of public keys; the first invalid entry wins."""
    if not isinstance(values, (list, tuple)):
        return build_failure(f"Invalid public key list: {values}", kind=ErrorKind.VALIDATION)
    parsed: List[Pubkey] = []
    for value in values:
        result = validate_public_key(value)
        if isinstance(result, ToolResult):
            return result
        parsed.append(result)
    return parsed


def is_valid_public_key(value: Any) -> bool:
    return isinstance(validate_public_key(value), Pubkey)
