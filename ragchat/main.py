"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, ragchat.api, ragchat.observability, ragchat.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ragchat import __version__
from ragchat.configs import get_settings
from ragchat.api import api_router
from ragchat.api.deps import get_service_cache
from ragchat.api.error_handlers import register_exception_handlers
from ragchat.api.routers import health_router
from ragchat.observability.logger import configure_logging
from ragchat.observability.middleware import (
    RequestLoggingMiddleware,
    CorrelationMiddleware,
)

load_dotenv()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the embedding provider, vector store and chat model once at startup.
    Missing credentials abort startup.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        logger.info("Initializing embedding provider, vector store and answer generator")
        cache.warm_up()
        logger.info(
            "Application startup complete: all resources initialized",
            extra={
                "vector_store": settings.vector_store.store_type,
                "embedding_model": settings.embedding.model,
                "llm_model": settings.llm.model,
            },
        )
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    # Shutdown
    logger.info("Application shutdown")
    await cache.close()


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="RAG Chat API",
        description="Upload a PDF or paste text, then chat with answers grounded in it",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register API routes
    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ragchat.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
