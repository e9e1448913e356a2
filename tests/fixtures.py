"""Shared test helpers."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient, Response

SECRET = "s3cret"


class FixedClock:
    """Returns 2026-10-19 06:23:00 UTC, then advances one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 10, 19, 6, 23, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


def auth_header(token: str = SECRET) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def post_beep(client: AsyncClient, text: str, token: str = SECRET) -> Response:
    """POST /beeps with a bearer token and return the raw response."""
    return await client.post("/beeps", json={"text": text}, headers=auth_header(token))
