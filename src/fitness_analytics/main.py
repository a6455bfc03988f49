"""FastAPI application for fitness-analytics."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.exception_handlers import register_exception_handlers
from .api.routes import analytics
from .config import get_settings
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application with middleware, handlers and routes."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Fitness Analytics API",
        description="Derived metrics from logged workouts and body measurements",
        version=__version__,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(analytics.router, prefix="/api/v1/analytics", tags=["analytics"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Fitness Analytics API",
            "version": __version__,
            "status": "healthy",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info("Fitness Analytics API v%s configured", __version__)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
