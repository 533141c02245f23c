"""FastAPI application entry point for AppointMe."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from appointme import __version__
from appointme.api.router import router as api_router
from appointme.config import get_settings
from appointme.database import engine
from appointme.exceptions import register_exception_handlers
from appointme.logging_config import setup_logging
from appointme.stores import InMemoryBookingStore

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - startup and shutdown events."""
    logger.info(f"Starting AppointMe API ({settings.app_env}, store={settings.store_backend})")

    if settings.store_backend == "postgres":
        logger.info(f"Database: {settings.async_database_url.split('@')[-1]}")  # Hide credentials
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")
        except Exception as e:
            logger.error(f"Database connection failed: {e}")

    yield

    logger.info("Shutting down AppointMe API...")
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title="AppointMe API",
    description="Appointment booking and client management for small businesses",
    version=__version__,
    lifespan=lifespan,
)

# Used when STORE_BACKEND=memory
app.state.memory_store = InMemoryBookingStore()

register_exception_handlers(app)

# CORS middleware
allowed_origins = [
    settings.frontend_url,
    "http://localhost:3000",  # Local development
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins if not settings.is_development else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": "AppointMe API",
        "version": __version__,
        "description": "Appointment booking and client management",
    }
