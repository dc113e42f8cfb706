"""
Nagar Alert Hub - FastAPI Application Entry Point

Community incident dashboard for Tier-2 and Tier-3 cities in India.
Residents' reports of traffic, power and water disruptions become
alerts whose confidence grows as neighbours support them.

DESIGN PRINCIPLES:
- Confidence comes from resident support only, by fixed thresholds
- Confidence never goes down
- The alert store is the single source of truth
- Feed, map, operator console and City Pulse only read snapshots
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.settings import settings
from app.routes import admin, alerts, city_pulse, health, map
from app.services.seed_service import seed_demo_alerts


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Community alert dashboard with crowd-derived confidence levels",
    debug=settings.DEBUG
)


# Global exception handler to catch ALL exceptions
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions and log them with full traceback."""
    logger.error(
        f"🔥 Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Internal server error: {str(exc)}"}
    )


# Pydantic validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Catch Pydantic validation errors and log them."""
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors())}
    )


# CORS configuration - origins come from settings, never "*"
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Application lifecycle events
@app.on_event("startup")
async def startup_event():
    """
    Initialize services on application startup.
    Currently: demo alert seeding
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    # DEMO SAFETY NET: the dashboard always has alerts to display
    if settings.SEED_DEMO_ALERTS:
        seed_demo_alerts()


@app.on_event("shutdown")
async def shutdown_event():
    """
    Cleanup on application shutdown.
    """
    logger.info(f"Shutting down {settings.APP_NAME}")


# Include routers
app.include_router(health.router)
app.include_router(alerts.router)
app.include_router(city_pulse.router)
app.include_router(map.router)
app.include_router(admin.router)


# Root endpoint
@app.get("/")
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "feed": "/alerts",
        "city_pulse": "/city-pulse",
        "map": "/map/markers"
    }
