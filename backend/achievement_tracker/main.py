"""
Achievement Tracker - FastAPI Application
Main application entry point with middleware and route configuration
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from achievement_tracker.api.v1 import api_router
from achievement_tracker.core.config import settings
from achievement_tracker.core.database import check_db_connection, engine, init_db

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION} ({settings.ENVIRONMENT})")

    if await check_db_connection():
        logger.info("Database connection established")
    else:
        logger.warning("Database connection check failed")

    await init_db()
    logger.info("Database tables initialized")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Lesson, quiz and assessment tracking with printable achievement reports",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get(f"{settings.API_V1_PREFIX}/health", tags=["Health"])
    async def api_v1_health_check():
        """API V1 Health check."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "achievement_tracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
