"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, ragdemo.api, ragdemo.observability, ragdemo.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from ragdemo import __version__
from ragdemo.api import api_router
from ragdemo.api.deps import get_service_cache
from ragdemo.api.errors import register_exception_handlers
from ragdemo.configs import get_settings
from ragdemo.observability.logger import configure_logging
from ragdemo.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and builds the vector store, chat client and
    orchestrator once, before the first request.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Application startup ({settings.environment}): logging configured")

    cache = get_service_cache()
    try:
        logger.info("Pre-warming service cache...")
        _ = cache.orchestrator
        _ = cache.collection_inspector
        logger.info("Service cache pre-warmed")
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error_msg": str(e)},
        )
        raise

    yield

    cache.clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        debug=get_settings().debug,
        title="RAG Demo API",
        description="Populate and query a vector store with an LLM",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = runs innermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ragdemo.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
