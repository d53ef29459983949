"""
Main entrypoint for the Bookshelf API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds and configures
an app with its own empty :class:`BookStore`; the module‑level ``app``
is the instance served by uvicorn, e.g.::

    uvicorn bookshelf_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.messages import get_message
from .core.store import BookStore
from .schemas.response import fail
from .services.book_service import BookService


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call returns an app holding a fresh, empty book collection,
    which is what the tests rely on for isolation.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.book_service = BookService(BookStore(), id_length=app_settings.book_id_length)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed JSON bodies never reach the handlers; answer them with
    # the same envelope the service uses for invalid payloads.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        action = "update" if request.method == "PUT" else "create"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=fail(get_message(action, "InvalidPayload", app_settings.message_locale)),
        )

    app.include_router(v1_router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
