"""Uniform HTML error pages."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import HTMLResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from beepboard.rendering import get_renderer

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The resource you requested can't be found."
SERVER_ERROR_MESSAGE = "Sorry, Something went wrong. This is probably not your fault."


def error_response(request: Request, status_code: int, message: str) -> HTMLResponse:
    return get_renderer().error(request, status_code, message)


def not_found(request: Request) -> HTMLResponse:
    return error_response(request, status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render 404 as the uniform page; other HTTP errors keep FastAPI's JSON body.

    405 is folded into 404 so a wrong method on /beeps looks like any unknown route.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return not_found(request)
    return await default_http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
