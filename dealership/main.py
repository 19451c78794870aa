"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealership.config import get_settings
from dealership.database import engine, health_check as database_health_check, init_db
from dealership.error_handlers import register_error_handlers
from dealership.logging_config import setup_logging
from dealership.routers import appointments, cars, services, uploads

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting {settings.app_name} {settings.app_version}")
    await init_db()
    logger.info(f"Database initialized, API available at {settings.api_prefix}")

    yield

    # Shutdown
    await engine.dispose()
    logger.info(f"Shutting down {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Dealership back office API

    Public endpoints list cars and services and accept appointment bookings.
    Admin endpoints manage cars, services and appointments and upload car photos.

    ### Entities:
    * **Cars**: Listings; at most three can be featured on the landing page
    * **Services**: Mechanics and detailing offers
    * **Appointments**: Bookings from the contact form
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(cars.router, prefix=settings.api_prefix)
app.include_router(services.router, prefix=settings.api_prefix)
app.include_router(appointments.router, prefix=settings.api_prefix)
app.include_router(uploads.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to the {settings.app_name} API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    database_ok = await database_health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unavailable",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dealership.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
