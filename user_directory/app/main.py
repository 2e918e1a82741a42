"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app`` so it can
be served directly, e.g.::

    uvicorn user_directory.app.main:app --port 3000

Each application owns exactly one :class:`UserStore`, kept on
``app.state`` and handed to route handlers through a dependency.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.user_store import UserStore


logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer undecodable bodies and path parameters with 400.

    Such requests never reach a handler, so the store is not touched.
    """
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve.  A new, empty one is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.user_store = store if store is not None else UserStore()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router)

    return app


app = create_app()
