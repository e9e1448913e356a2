"""Beepboard FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from beepboard.beeps.router import get_beep_log
from beepboard.beeps.router import router as beeps_router
from beepboard.config import get_settings, load_settings
from beepboard.errors import install_error_handlers
from beepboard.events.store import BeepLog
from beepboard.pages.router import router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings once and wire the shared beep log."""
    settings = load_settings()
    app.dependency_overrides[get_settings] = lambda: settings

    # One log for the process lifetime; it is gone when the process exits
    log = BeepLog()
    app.dependency_overrides[get_beep_log] = lambda: log

    if settings.max_text_length is not None:
        logger.info("Beep text limited to %d characters", settings.max_text_length)
    yield

    app.dependency_overrides.pop(get_settings, None)
    app.dependency_overrides.pop(get_beep_log, None)


app = FastAPI(
    title="Beepboard",
    description="Post short authenticated notices and read them newest first",
    version="0.1.0",
    lifespan=lifespan,
)

install_error_handlers(app)

app.include_router(pages_router)
app.include_router(beeps_router)
