"""
DIVECAR Osasco - Main FastAPI Application
=========================================

Backend for the DIVECAR Osasco site: institutional pages, the investigation
case board and the suspicious vehicle registry, with media kept in object
storage.

Version: 1.0.0
"""

import sys
from pathlib import Path

# Add backend directory to Python path
sys.path.insert(0, str(Path(__file__).parent))

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from sqlalchemy import text
import logging
import uvicorn

from config import settings
from database import init_db, SessionLocal
from routes import auth_router, content_router, investigations_router, suspicious_vehicles_router
from routes.schemas import HealthResponse
from services.errors import ServiceError
from services.storage import get_storage_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan events handler.
    Handles startup and shutdown events.
    """
    logger.info("Starting DIVECAR Osasco backend...")

    logger.info("Initializing database...")
    try:
        init_db()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise

    logger.info(
        f"Media buckets: {settings.INVESTIGATION_MEDIA_BUCKET}, "
        f"{settings.SUSPICIOUS_VEHICLE_PHOTOS_BUCKET}"
    )
    logger.info("System startup complete!")

    yield

    logger.info("Shutting down DIVECAR Osasco backend...")


# API Tags for Swagger grouping
tags_metadata = [
    {
        "name": "Health",
        "description": "System health check endpoints for monitoring and status verification.",
    },
    {
        "name": "Content",
        "description": "Institutional pages: home, about, history, hierarchy, recruitment.",
    },
    {
        "name": "Investigations",
        "description": "Investigation case board with R.O. numbers and attached media.",
    },
    {
        "name": "Suspicious Vehicles",
        "description": "Suspicious vehicle registry. Registering and deleting require the `X-Action-Password` header.",
    },
    {
        "name": "Authentication",
        "description": "E-mail sign-up, login and token management.",
    },
]

app = FastAPI(
    title="DIVECAR Osasco API",
    description="""
## DIVECAR Osasco

Backend of the vehicle-crime division site.

### Features

| Feature | Description |
|---------|-------------|
| **Institutional pages** | Home, about, history, hierarchy and recruitment content |
| **Investigations** | Case board with automatic R.O. numbers and media uploads |
| **Suspicious Vehicles** | Registry of flagged vehicles with a photo each |
| **Accounts** | E-mail sign-up and JWT login |

### Media

Files are stored in public buckets under `{record_id}/{timestamp}_{filename}`.
Deleting a record removes its files; files already gone count as removed.

---
**Version**: 1.0.0
    """,
    version=VERSION,
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Configure CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    """Return normalized service failures as {success, error}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions gracefully."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if settings.SECRET_KEY == "your-super-secret-key-change-in-production" else "An error occurred"
        }
    )


# Include routers
app.include_router(content_router)
app.include_router(investigations_router)
app.include_router(suspicious_vehicles_router)
app.include_router(auth_router)


# Health check endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with system information."""
    return {
        "name": "DIVECAR Osasco API",
        "version": VERSION,
        "status": "running",
        "documentation": "/docs"
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint for monitoring.
    Returns system status and component health.
    """
    services_status = {
        "database": "unknown",
        "storage": "unknown"
    }

    # Check database
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
        services_status["database"] = "healthy"
    except Exception as e:
        services_status["database"] = f"unhealthy: {str(e)}"

    # Check both media buckets
    try:
        storage = get_storage_client()
        for bucket in (settings.INVESTIGATION_MEDIA_BUCKET, settings.SUSPICIOUS_VEHICLE_PHOTOS_BUCKET):
            storage.ping(bucket)
        services_status["storage"] = "healthy"
    except Exception as e:
        services_status["storage"] = f"unhealthy: {str(e)}"

    overall_status = "healthy" if all(
        s == "healthy" for s in services_status.values()
    ) else "degraded"

    return HealthResponse(
        status=overall_status,
        version=VERSION,
        timestamp=datetime.now(timezone.utc),
        services=services_status
    )


# Run with uvicorn when executed directly
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
