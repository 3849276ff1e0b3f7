"""
Token-bucket throttling of tool calls, keyed by tool name.

State lives in this process only. It shields the Helius key from a runaway
client; it is not a quota shared between server instances.
"""

from __future__ import annotations

import asyncio
import math
import time
from typing import Dict, Mapping, Optional


class TokenBucket:
    def __init__(self, rate: float, capacity: float) -> None:
        self.rate = rate
        self.capacity = capacity
        self.tokens = capacity
        self.timestamp = time.monotonic()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = time.monotonic()
        self.tokens = min(self.capacity, self.tokens + (now - self.timestamp) * self.rate)
        self.timestamp = now

    async def consume(self, amount: float = 1.0) -> bool:
        async with self._lock:
            self._refill()
            if self.tokens < amount:
                return False
            self.tokens -= amount
            return True

    def seconds_until(self, amount: float = 1.0) -> float:
        """Time until ``amount`` tokens are available, ignoring other callers."""
        missing = amount - self.tokens
        if missing <= 0 or self.rate <= 0:
            return 0.0
        return missing / self.rate


class RateLimiter:
    def __init__(self, rate_per_sec: float, burst: Optional[float] = None) -> None:
        self.bucket = TokenBucket(rate_per_sec, rate_per_sec if burst is None else burst)

    async def allow(self) -> bool:
        return await self.bucket.consume()


class PerKeyRateLimiter:
    """
    One bucket per tool name, created on first use.

    ``per_tool`` maps tool names to their own calls-per-second. Those buckets
    hold at least one token so a fractional rate still admits a first call.
    """

    def __init__(
        self,
        rate_per_sec: float,
        burst: Optional[float] = None,
        *,
        per_tool: Optional[Mapping[str, float]] = None,
    ) -> None:
        self.rate = rate_per_sec
        self.burst = rate_per_sec if burst is None else burst
        self.per_tool: Dict[str, float] = dict(per_tool or {})
        self._limiters: Dict[str, RateLimiter] = {}
        self._lock = asyncio.Lock()

    def _build(self, key: str) -> RateLimiter:
        override = self.per_tool.get(key)
        if override is None:
            return RateLimiter(self.rate, self.burst)
        return RateLimiter(override, max(override, 1.0))

    async def allow(self, key: str) -> bool:
        async with self._lock:
            limiter = self._limiters.get(key)
            if limiter is None:
                limiter = self._limiters[key] = self._build(key)
        return await limiter.allow()

    def retry_after(self, key: str) -> int:
        """Whole seconds a throttled caller should wait; at least 1."""
        limiter = self._limiters.get(key)
        if limiter is None:
            return 1
        return max(1, math.ceil(limiter.bucket.seconds_until()))
