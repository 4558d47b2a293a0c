"""FastAPI application entrypoint for the contacts service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from contactbook.api.middleware.logging import LoggingMiddleware
from contactbook.api.routes import contacts, pages
from contactbook.core.config import Settings, get_settings
from contactbook.core.database import ContactStore
from contactbook.core.exceptions import ApplicationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the store before serving and close it on shutdown."""

    store: ContactStore = app.state.store
    await store.connect()
    try:
        yield
    finally:
        await store.close()


def create_app(settings: Optional[Settings] = None, store: Optional[ContactStore] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or ContactStore.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Routers
    app.include_router(contacts.router)
    app.include_router(pages.router)

    for name in ("css", "js", "images"):
        app.mount(f"/{name}", StaticFiles(directory=pages.STATIC_DIR / name), name=name)

    @app.get("/health", response_class=PlainTextResponse, include_in_schema=False)
    async def health() -> str:
        return "OK"

    @app.exception_handler(ApplicationError)
    async def handle_application_error(_: Request, exc: ApplicationError):
        """Render application errors as ``{"error": ..., "code": ...}``."""

        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Request body must be valid JSON", "code": "validation_error"},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error", "code": "server_error"},
        )

    return app


app = create_app()
