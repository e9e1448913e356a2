"""Append-only beep log held in process memory."""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime

from beepboard.models import Beep, format_timestamp


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BeepLog:
    """Append-only, lock-guarded sequence of beeps, oldest first.

    Both append and snapshot take the same lock, so a snapshot never sees
    the list while it is being resized. Nothing but the list append or copy
    happens while the lock is held.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._beeps: list[Beep] = []
        self._lock = asyncio.Lock()
        self._clock = clock or _utcnow

    async def append(self, text: str) -> None:
        """Stamp the current time and add a beep to the end of the log."""
        async with self._lock:
            beep = Beep(text=text, timestamp=format_timestamp(self._clock()))
            self._beeps.append(beep)

    async def snapshot(self) -> list[Beep]:
        """Return an independent copy of the log in append order."""
        async with self._lock:
            return list(self._beeps)
