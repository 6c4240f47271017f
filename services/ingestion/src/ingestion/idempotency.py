"""
Idempotency store for CallWatch ingestion.

Records the result of each call submission under its caller-supplied
idempotency key so a repeated submission replays the stored result
instead of persisting and matching again. Results live in process
memory only and are lost on restart.

Each key has its own ``asyncio.Lock``: concurrent submissions with the
same key are serialised, the first one runs the workflow and the rest
replay its result.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class _IdempotencyEntry(Generic[T]):
    """A recorded result and the monotonic time it was stored."""

    result: T
    stored_at: float


@dataclass
class _KeyLock:
    """Lock for one key and the number of submissions holding or awaiting it."""

    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    users: int = 0


class IdempotencyStore:
    """Process-scoped map from idempotency key to recorded result.

    Args:
        ttl_seconds: How long a result is replayed.  ``None`` keeps it for
            the lifetime of the process.
        clock: Monotonic time source (overridable in tests).
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _IdempotencyEntry[Any]] = {}
        # Dropped once no submission for the key is running or waiting.
        self._locks: dict[str, _KeyLock] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _expired(self, entry: _IdempotencyEntry[Any]) -> bool:
        if self._ttl_seconds is None:
            return False
        return self._clock() - entry.stored_at >= self._ttl_seconds

    def _purge_expired(self) -> None:
        if self._ttl_seconds is None:
            return
        stale = [key for key, entry in self._entries.items() if self._expired(entry)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug("idempotency_entries_expired", count=len(stale))

    def get(self, key: str) -> Any | None:
        """Return the live result recorded under *key*, or ``None``."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._expired(entry):
            del self._entries[key]
            return None
        return entry.result

    async def run(
        self,
        key: str,
        operation: Callable[[], Awaitable[T]],
    ) -> tuple[T, bool]:
        """Return the result recorded under *key*, running *operation* once.

        Exceptions from *operation* propagate and nothing is recorded, so
        a later submission with the same key runs again.

        Args:
            key: Caller-supplied idempotency key.
            operation: Zero-argument callable performing the side effects.

        Returns:
            ``(result, replayed)`` where *replayed* is ``True`` when the
            result came from an earlier submission.
        """
        self._purge_expired()
        slot = self._locks.get(key)
        if slot is None:
            slot = self._locks[key] = _KeyLock()
        slot.users += 1
        try:
            async with slot.lock:
                cached = self.get(key)
                if cached is not None:
                    logger.info("idempotent_replay", idempotency_key=key)
                    return cached, True
                result = await operation()
                self._entries[key] = _IdempotencyEntry(result=result, stored_at=self._clock())
                return result, False
        finally:
            slot.users -= 1
            if slot.users == 0:
                del self._locks[key]

    def clear(self) -> None:
        """Forget every recorded result."""
        self._entries.clear()
