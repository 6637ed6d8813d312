"""
Main entrypoint for the Users API.

This module assembles the FastAPI application: it sets up logging,
installs the error envelope and mounts the route table under ``/api``.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --port 4000

Error rendering works in two layers.  Every ``HTTPException`` (our own
``ApiError`` as well as Starlette's 404/405) is turned into
``{"message": ...}`` by :func:`http_error_handler`.  Anything else is
caught by :class:`InternalErrorMiddleware`, logged with its traceback
and answered with 500 so a failing request never takes the process
down or leaves the connection open.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.errors import DEFAULT_MESSAGES, ApiError, ErrorMessage
from .core.logging_config import setup_logging
from .core.storage import get_store

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


class InternalErrorMiddleware(BaseHTTPMiddleware):
    """Convert unhandled exceptions into 500 ``Internal server error``."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(500, ErrorMessage.INTERNAL_SERVER_ERROR.value)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, ApiError):
        message = exc.message.value
    else:
        default = DEFAULT_MESSAGES.get(exc.status_code)
        message = default.value if default is not None else str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Make sure the backing file exists before the first request.
    store = get_store()
    users = store.read_all()
    logger.info("Serving %d users from %s", len(users), store.path)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_middleware(InternalErrorMiddleware)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
