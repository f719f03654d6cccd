"""
FastAPI application entry point for the Flashdeck API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashdeck.api.errors import setup_error_handlers
from flashdeck.api.routers import v1_router
from flashdeck.data import Base
from flashdeck.infra.config.database import dispose_engine, get_engine
from flashdeck.infra.config.logging_config import get_logger, setup_logging
from flashdeck.infra.config.settings import get_settings
from flashdeck.infra.middleware.request_context import RequestContextMiddleware

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging()
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database.initialized")

    yield

    await dispose_engine()
    logger.info("app.shutdown", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Flashcard decks, deduplicated cards and study telemetry",
        version=VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)
    app.include_router(v1_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": settings.app_name, "version": VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "flashdeck.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
