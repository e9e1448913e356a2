"""FastAPI routes for the home page and static assets."""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse

from beepboard.beeps.router import get_beep_log
from beepboard.errors import not_found
from beepboard.events.store import BeepLog
from beepboard.rendering import PageRenderer, far_expires, get_renderer

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    log: BeepLog = Depends(get_beep_log),
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """List beeps, newest first."""
    beeps = await log.snapshot()
    beeps.reverse()
    return renderer.page(request, beeps)


@router.get("/static/{filename}")
async def static_file(
    filename: str,
    request: Request,
    renderer: PageRenderer = Depends(get_renderer),
) -> Response:
    """Serve a static file with its MIME type and a far Expires header, or 404."""
    data = renderer.assets.get(filename)
    if data is None:
        return not_found(request)
    return Response(
        content=data.content,
        media_type=data.mime,
        headers={"Expires": far_expires()},
    )
