"""HTML rendering and static assets.

Templates live in ``beepboard/templates`` and are rendered with Jinja2
(autoescaping on). Static files in ``beepboard/static`` are read into memory
once and published under content-hashed names, so they can be served with a
far-future expiry and still change on every deploy.
"""

import hashlib
import mimetypes
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from functools import lru_cache
from http import HTTPStatus
from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from beepboard.models import Beep

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"
STATIC_URL_PREFIX = "/static/"

FAR_EXPIRES = timedelta(days=180)

FOOTER_LINKS: list[tuple[str, str]] = [
    ("love", "https://fastapi.tiangolo.com/"),
    ("tears", "https://jinja.palletsprojects.com/"),
]


@dataclass(frozen=True)
class StaticFile:
    name: str
    content: bytes
    mime: str


def hashed_name(path: Path, content: bytes) -> str:
    """'style.css' -> 'style-1a2b3c4d.css' using the first 8 hex of sha256."""
    digest = hashlib.sha256(content).hexdigest()[:8]
    return f"{path.stem}-{digest}{path.suffix}"


def far_expires(now: datetime | None = None) -> str:
    """HTTP-date 180 days from now, for the Expires header."""
    now = now or datetime.now(UTC)
    return format_datetime(now + FAR_EXPIRES, usegmt=True)


class StaticAssets:
    """In-memory table of static files keyed by their hashed name."""

    def __init__(self, files: list[tuple[str, StaticFile]] | None = None) -> None:
        self._by_name: dict[str, StaticFile] = {}
        self._urls: dict[str, str] = {}
        for original, static_file in files or []:
            self._by_name[static_file.name] = static_file
            self._urls[original] = STATIC_URL_PREFIX + static_file.name

    @classmethod
    def from_directory(cls, directory: Path) -> "StaticAssets":
        files = []
        for path in sorted(directory.iterdir()):
            if not path.is_file():
                continue
            content = path.read_bytes()
            mime, _ = mimetypes.guess_type(path.name)
            files.append((
                path.name,
                StaticFile(
                    name=hashed_name(path, content),
                    content=content,
                    mime=mime or "application/octet-stream",
                ),
            ))
        return cls(files)

    def get(self, name: str) -> StaticFile | None:
        return self._by_name.get(name)

    def url_for(self, original_name: str) -> str:
        """Public URL of a static file, by its name in the static directory.

        Raises KeyError for unknown files so a broken template fails loudly.
        """
        return self._urls[original_name]


class PageRenderer:
    """Renders the home page and error pages."""

    def __init__(self, templates_dir: Path, assets: StaticAssets) -> None:
        self.assets = assets
        self._templates = Jinja2Templates(directory=str(templates_dir))
        self._templates.env.globals["static_url"] = assets.url_for
        self._templates.env.globals["footer_links"] = FOOTER_LINKS

    def page(self, request: Request, beeps: list[Beep]) -> HTMLResponse:
        """Render beeps in the order given."""
        return self._templates.TemplateResponse(
            request,
            "page.html",
            {"beeps": beeps},
        )

    def error(self, request: Request, status_code: int, message: str) -> HTMLResponse:
        return self._templates.TemplateResponse(
            request,
            "error.html",
            {
                "status_code": status_code,
                "reason": HTTPStatus(status_code).phrase,
                "message": message,
            },
            status_code=status_code,
        )


@lru_cache(maxsize=1)
def get_renderer() -> PageRenderer:
    """Renderer over the packaged templates and static files."""
    return PageRenderer(TEMPLATES_DIR, StaticAssets.from_directory(STATIC_DIR))
