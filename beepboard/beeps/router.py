"""FastAPI routes for posting beeps."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from beepboard.auth import require_token
from beepboard.beeps.schemas import CreateBeepRequest
from beepboard.config import Settings, get_settings
from beepboard.events.store import BeepLog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["beeps"])


class TextTooLongError(Exception):
    pass


def get_beep_log() -> BeepLog:
    """Dependency placeholder — overridden at startup."""
    raise RuntimeError("BeepLog not configured")


def check_text_length(text: str, max_length: int | None) -> None:
    """Raise TextTooLongError if a length cap is configured and exceeded."""
    if max_length is not None and len(text) > max_length:
        raise TextTooLongError(
            f"Beep text is {len(text)} characters; the limit is {max_length}"
        )


@router.post(
    "/beeps",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_token)],
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CreateBeepRequest.model_json_schema()}
            },
        }
    },
)
async def create_beep(
    request: Request,
    settings: Settings = Depends(get_settings),
    log: BeepLog = Depends(get_beep_log),
) -> Response:
    # The body is parsed here rather than as a parameter so that the token
    # check always runs first, even for malformed JSON.
    try:
        payload = CreateBeepRequest.model_validate_json(await request.body())
    except ValidationError as e:
        # Drop the echoed input: it may be undecodable bytes of any size
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors) from e

    try:
        check_text_length(payload.text, settings.max_text_length)
    except TextTooLongError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    await log.append(payload.text)
    logger.info("Stored a beep (%d characters)", len(payload.text))
    return Response(status_code=status.HTTP_201_CREATED)
