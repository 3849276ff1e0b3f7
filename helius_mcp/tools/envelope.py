"""Uniform success/failure result returned by every tool."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    REMOTE = "remote"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class TextContent:
    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True, slots=True)
class ToolResult:
    """
    A tool outcome with exactly one text block.

    ``kind`` classifies failures for logging and metrics; it stays internal and
    is not part of the wire shape produced by ``to_dict``.
    """

    is_error: bool
    content: Tuple[TextContent, ...]
    kind: Optional[ErrorKind] = None

    @property
    def text(self) -> str:
        return self.content[0].text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isError": self.is_error,
            "content": [block.to_dict() for block in self.content],
        }


def build_success(message: str) -> ToolResult:
    return ToolResult(is_error=False, content=(TextContent(text=message),))


def build_failure(message: str, kind: ErrorKind = ErrorKind.REMOTE) -> ToolResult:
    return ToolResult(is_error=True, content=(TextContent(text=message),), kind=kind)
