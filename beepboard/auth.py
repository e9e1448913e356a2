"""Bearer-token gate for mutating endpoints.

A failed check is reported as 404, the same response an unknown route
gets, so unauthorized callers cannot tell that the endpoint exists.
"""

import hmac
import logging

from fastapi import Depends, HTTPException, Request, status

from beepboard.config import Settings, get_settings

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class AuthMismatchError(Exception):
    pass


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the credential from an 'Authorization: Bearer <token>' value.

    The scheme is matched case-insensitively. The token is returned exactly
    as sent after the single separating space. None if absent or not Bearer.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != BEARER_SCHEME or not token:
        return None
    return token


def wire_bytes(value: str) -> bytes | None:
    """Recover the bytes a client sent from a header value.

    Header values are decoded as latin-1, so encoding back gives the
    original bytes. None for strings that cannot have come off the wire.
    """
    try:
        return value.encode("latin-1")
    except UnicodeEncodeError:
        return None


def token_matches(supplied: bytes | None, secret: str) -> bool:
    """Byte-for-byte comparison against the UTF-8 secret, in constant time."""
    if supplied is None:
        return False
    return hmac.compare_digest(supplied, secret.encode("utf-8"))


def check_token(authorization: str | None, secret: str) -> None:
    """Raise AuthMismatchError unless the header carries the configured secret."""
    token = extract_bearer_token(authorization)
    supplied = wire_bytes(token) if token is not None else None
    if not token_matches(supplied, secret):
        raise AuthMismatchError("Bearer credential does not match")


async def require_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """FastAPI dependency guarding mutation. Runs before body validation."""
    try:
        check_token(request.headers.get("Authorization"), settings.secret)
    except AuthMismatchError:
        client = request.client.host if request.client else "unknown"
        logger.warning("Rejected bearer credential on %s from %s", request.url.path, client)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
