"""In-memory, append-only log of beeps."""

from beepboard.events.store import BeepLog

__all__ = ["BeepLog"]
