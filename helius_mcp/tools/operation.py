"""
Declarative tool wrapper.

Every tool follows the same contract: validate address-like inputs, make one
remote call, render the response as text, and turn any failure into an
envelope. ``Operation`` captures that contract once; tool modules only declare
the schema, the client call, and how the result reads.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

from helius_mcp.helius_api import HeliusApiError
from helius_mcp.tools.envelope import ErrorKind, ToolResult, build_failure, build_success
from helius_mcp.tools.validators import validate_public_key, validate_public_keys

logger = logging.getLogger(__name__)

RemoteCall = Callable[[Any, Dict[str, Any]], Awaitable[Any]]
Renderer = Callable[[Any], str]


def format_value(value: Any) -> str:
    """Strings and numbers read literally; composites become indented JSON."""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, indent=2, default=str)
    return json.dumps(value, default=str)


def labelled(label: str) -> Renderer:
    def render(value: Any) -> str:
        return f"{label}: {format_value(value)}"

    return render


class _Blank(dict):
    def __missing__(self, key: str) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    description: str
    action: str
    input_schema: Dict[str, Any]
    call: RemoteCall
    render: Renderer
    addresses: Tuple[str, ...] = ()
    address_lists: Tuple[str, ...] = ()
    not_found: Optional[str] = None

    def _validate(self, arguments: Mapping[str, Any]) -> Dict[str, Any] | ToolResult:
        validated = dict(arguments)
        required = set(self.input_schema.get("required", ()))
        for name in self.input_schema.get("properties", {}):
            value = arguments.get(name)
            if name in self.addresses or name in self.address_lists:
                if value is None and name not in required:
                    continue
                if name in self.addresses:
                    result = validate_public_key(value)
                else:
                    result = validate_public_keys(value)
                if isinstance(result, ToolResult):
                    return result
                validated[name] = result
            elif value is None and name in required:
                return build_failure(
                    f"Missing required parameter: {name}", kind=ErrorKind.VALIDATION
                )
        return validated

    async def __call__(
        self, arguments: Optional[Mapping[str, Any]] = None, *, client: Any
    ) -> ToolResult:
        arguments = dict(arguments or {})
        validated = self._validate(arguments)
        if isinstance(validated, ToolResult):
            return validated

        try:
            response = await self.call(client, validated)
        except HeliusApiError as exc:
            logger.warning("tool=%s remote error while %s: %s", self.name, self.action, exc)
            return build_failure(f"Error {self.action}: {exc}", kind=ErrorKind.REMOTE)
        except Exception as exc:
            logger.exception("Unexpected error while %s", self.action)
            return build_failure(f"Error {self.action}: {exc}", kind=ErrorKind.REMOTE)

        if self.not_found is not None and response is None:
            message = self.not_found.format_map(_Blank(arguments))
            return build_failure(message, kind=ErrorKind.NOT_FOUND)

        return build_success(self.render(response))

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }
