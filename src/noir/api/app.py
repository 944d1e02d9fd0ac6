"""FastAPI application exposing the Noir note store to the UI."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from noir.api.middleware import api_key_middleware
from noir.api.routes import capture, health, images, notes, reminders, settings
from noir.core.config import NOIR_API_KEY, NOIR_CORS_ORIGINS, NOIR_HOST, NOIR_PORT
from noir.core.store import NoteStore, build_store
from noir.core.types import StoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Noir API starting up (data dir: {app.state.store.layout.root})")
    if not app.state.api_key:
        logger.warning("NOIR_API_KEY not set - API is running without authentication")
    yield
    logger.info("Noir API shutting down...")


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Report storage failures so the UI can alert the user."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(store: NoteStore | None = None, api_key: str | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Note store to serve (built from config if omitted)
        api_key: Required X-API-Key value (defaults to NOIR_API_KEY)
    """
    app = FastAPI(
        title="Noir API",
        description="Local API for Noir - dated notes with review reminders",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_store()
    app.state.api_key = api_key if api_key is not None else NOIR_API_KEY

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=NOIR_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add API key authentication middleware
    app.middleware("http")(api_key_middleware)

    app.add_exception_handler(StoreError, store_error_handler)

    # Include routers
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(settings.router, prefix="/api/v1", tags=["Settings"])
    app.include_router(notes.router, prefix="/api/v1", tags=["Notes"])
    app.include_router(reminders.router, prefix="/api/v1", tags=["Reminders"])
    app.include_router(images.router, prefix="/api/v1", tags=["Images"])
    app.include_router(capture.router, prefix="/api/v1", tags=["Capture"])

    return app


def run_server(host: str | None = None, port: int | None = None):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "noir.api.app:create_app",
        factory=True,
        host=host or NOIR_HOST,
        port=port or NOIR_PORT,
        reload=False,
    )


if __name__ == "__main__":
    run_server()
