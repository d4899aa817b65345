"""
Webinar API - Main Application Entry Point

Organizers schedule webinars and raise their seat capacity:
- POST /webinars              organize a webinar
- POST /webinars/{id}/seats   change the seat count (organizer only)
- GET  /webinars/{id}         read a webinar (Redis cached)
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from webinar_api.core.config import get_settings
from webinar_api.core.logging import setup_logging, get_logger
from webinar_api.core.metrics import metrics_endpoint
from webinar_api.api.errors import register_error_handlers
from webinar_api.api.router import api_router
from webinar_api.api.middleware import RequestLoggingMiddleware
from webinar_api.db.session import engine
from webinar_api.infrastructure.redis_client import get_redis, close_redis
from webinar_api.services.cache_service import get_cache_stats

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging(settings)
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    if await get_redis():
        logger.info("redis_ready")
    elif settings.REDIS_ENABLED:
        logger.warning("redis_unavailable", message="Running without cache")

    yield

    await close_redis()
    await engine.dispose()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Webinar scheduling API",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestLoggingMiddleware)
register_error_handlers(app)
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "cache": await get_cache_stats(),
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
def metrics():
    return metrics_endpoint()
