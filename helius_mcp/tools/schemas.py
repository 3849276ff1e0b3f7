"""JSON-Schema fragments shared by tool declarations."""

from __future__ import annotations

from typing import Any, Dict, Iterable

from helius_mcp.tools.validators import BASE58_REGEX, PUBLIC_KEY_MAX_LENGTH, PUBLIC_KEY_MIN_LENGTH

COMMITMENT_LEVELS = ["processed", "confirmed", "finalized"]


def public_key(description: str = "Solana public key (Base58)") -> Dict[str, Any]:
    return {
        "type": "string",
        "description": description,
        "pattern": BASE58_REGEX.pattern,
        "minLength": PUBLIC_KEY_MIN_LENGTH,
        "maxLength": PUBLIC_KEY_MAX_LENGTH,
    }


def public_keys(description: str = "List of Solana public keys (Base58)") -> Dict[str, Any]:
    return {"type": "array", "description": description, "items": public_key()}


def string(description: str | None = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string"}
    if description:
        schema["description"] = description
    return schema


def strings(description: str | None = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "array", "items": {"type": "string"}}
    if description:
        schema["description"] = description
    return schema


def integer(description: str | None = None, *, minimum: int = 0) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "integer", "minimum": minimum}
    if description:
        schema["description"] = description
    return schema


def boolean(description: str | None = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "boolean"}
    if description:
        schema["description"] = description
    return schema


COMMITMENT = {
    "type": "string",
    "description": "Commitment level",
    "enum": COMMITMENT_LEVELS,
}
PAGE = integer("Page number (1-based)", minimum=1)
LIMIT = integer("Maximum number of items", minimum=1)


def object_schema(
    properties: Dict[str, Any] | None = None,
    required: Iterable[str] = (),
    *,
    additional: bool = False,
) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties or {},
        "required": list(required),
        "additionalProperties": additional,
    }
