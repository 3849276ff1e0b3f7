"""In-process tool and request counters (per process, not aggregated)."""

from __future__ import annotations

from collections import Counter, OrderedDict
from threading import Lock
from typing import Dict

from helius_mcp.tools.envelope import ToolResult

# Only the most recent request timings are kept; stdio sessions can be long-lived.
MAX_RECENT_DURATIONS = 100


class MetricsRecorder:
    def __init__(self, max_recent: int = MAX_RECENT_DURATIONS) -> None:
        self._lock = Lock()
        self._max_recent = max_recent
        self._requests = 0
        self._recent_durations_ms: "OrderedDict[str, float]" = OrderedDict()
        self._rate_limited = 0
        self._tool_success: Counter[str] = Counter()
        self._tool_error: Counter[str] = Counter()
        self._error_kinds: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._recent_durations_ms[request_id] = duration_ms
            while len(self._recent_durations_ms) > self._max_recent:
                self._recent_durations_ms.popitem(last=False)

    def incr_rate_limited(self) -> None:
        with self._lock:
            self._rate_limited += 1

    def record_result(self, tool: str, result: ToolResult) -> None:
        """Count one tool outcome; failures are also counted by error kind."""
        with self._lock:
            if not result.is_error:
                self._tool_success[tool] += 1
                return
            self._tool_error[tool] += 1
            kind = result.kind.value if result.kind is not None else "unknown"
            self._error_kinds[kind] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "rate_limited": self._rate_limited,
                "tool_success": dict(self._tool_success),
                "tool_error": dict(self._tool_error),
                "error_kinds": dict(self._error_kinds),
                "recent_request_durations_ms": dict(self._recent_durations_ms),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._recent_durations_ms.clear()
            self._rate_limited = 0
            self._tool_success.clear()
            self._tool_error.clear()
            self._error_kinds.clear()


default_metrics = MetricsRecorder()
