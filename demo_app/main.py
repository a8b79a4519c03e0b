import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .api.routes import health, info
from .config import Settings, get_settings
from .database import DatabaseProbe, create_engine_from_settings
from .docs import (
    API_DESCRIPTION,
    get_servers,
    get_swagger_ui_parameters,
    get_tags_metadata,
)
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the connection pool for the lifetime of the application."""

    settings: Settings = app.state.settings
    engine = create_engine_from_settings(settings)
    app.state.probe = DatabaseProbe(engine)
    logger.info("Starting demo app on port %s, env=%s", settings.port, settings.app_env)
    try:
        yield
    finally:
        await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application instance."""

    settings = settings or get_settings()

    app = FastAPI(
        title="platform-demo-app",
        description=API_DESCRIPTION,
        version=__version__,
        servers=get_servers(),
        openapi_tags=get_tags_metadata(),
        lifespan=lifespan,
        swagger_ui_parameters=get_swagger_ui_parameters(),
    )
    app.state.settings = settings

    app.include_router(info.router)
    app.include_router(health.router)

    return app


def serve() -> None:
    """Run the service under uvicorn; a failed bind ends the process."""

    import uvicorn

    settings = app.state.settings
    configure_logging(settings.log_level)
    uvicorn.run(
        app,
        host=settings.bind_host,
        port=settings.port,
        log_config=None,
    )


# Module-level instance for `uvicorn demo_app.main:app`; serve() runs the same one.
app = create_app()


if __name__ == "__main__":
    serve()
