"""Canonical data structures for Beepboard.

A beep is a short notice with a server-assigned creation time. The
timestamp is formatted once, when the beep is stored, and never changes.
"""

from datetime import datetime
from email.utils import format_datetime

from pydantic import BaseModel, ConfigDict


def format_timestamp(moment: datetime) -> str:
    """Format an aware datetime as RFC 2822, e.g. 'Mon, 19 Oct 2026 06:23:00 +0000'."""
    return format_datetime(moment)


class Beep(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    timestamp: str
