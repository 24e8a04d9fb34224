import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from shorturl_app.config import settings
from shorturl_app.database.connection import engine, init_db
from shorturl_app.dependencies import get_cache, get_access_log
from shorturl_app.errors import register_exception_handlers
from shorturl_app.logging_config import configure_logging
from shorturl_app.api.v1 import analytics, redirect, urls

configure_logging(settings.log_level)
logger = logging.getLogger("shorturl_app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup; release cache, access log and DB on shutdown."""
    init_db()
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    logger.info("Shutting down: closing cache, access log and database connections")
    await get_cache().close()
    await get_access_log().close()
    engine.dispose()
    logger.info("Server shut down successfully")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
# /shorten and /analytics before the catch-all /{short_url_id}
app.include_router(urls.router)
app.include_router(analytics.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
